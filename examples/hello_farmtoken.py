import farmtoken


def main() -> None:
    # Starts a local server (simulated ledger unless OPERATOR_ID/OPERATOR_KEY/LEDGER_URL are set),
    # or attaches to one already running at FARMTOKEN_URL.
    server = farmtoken.run(port=0)
    client = server if isinstance(server, farmtoken.FarmTokenClient) else server.client()

    farm = client.register_farm("Oak Farm", "Devon", 400000, hectares=120)
    print(f"registered {farm['id']}: up to {farm['maxTokenisableValue']} tokens")

    res = client.tokenise_farm(farm["id"])
    print(f"tokenised {res['farm']['id']} as {res['tokenId']}")

    # Safe to repeat: nothing new is issued.
    again = client.tokenise_farm(farm["id"])
    print(again.get("message"), again["tokenId"])


if __name__ == "__main__":
    main()
