from __future__ import annotations

from typing import Any

import httpx

from .gateway import GatewayError, TokenSpec


class HttpLedgerGateway:
    """Create fungible tokens through a ledger signing service over HTTP.

    Contract (current):
    - POST {base_url}/api/tokens  (JSON)  ->  {"tokenId": "0.0.1234", ...}

    The service holds the network connection and submits the token-create
    transaction; the operator key is sent as a bearer token and never logged.
    """

    def __init__(
        self,
        base_url: str,
        *,
        operator_key: str | None = None,
        timeout_s: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._operator_key = operator_key
        self._timeout_s = float(timeout_s)
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"accept": "application/json"}
        if self._operator_key:
            headers["authorization"] = f"Bearer {self._operator_key}"
        return headers

    @staticmethod
    def request_body(spec: TokenSpec) -> dict[str, Any]:
        return {
            "tokenName": spec.name,
            "tokenSymbol": spec.symbol,
            "tokenType": "FUNGIBLE_COMMON",
            "supplyType": spec.supply_type.upper(),
            "initialSupply": int(spec.initial_supply),
            "maxSupply": int(spec.max_supply),
            "decimals": int(spec.decimals),
            "treasuryAccountId": spec.issuer.account_id,
            "network": spec.issuer.network,
        }

    def create_fungible_asset(self, spec: TokenSpec) -> str:
        try:
            with httpx.Client(
                base_url=self.base_url,
                timeout=self._timeout_s,
                headers=self._headers(),
                transport=self._transport,
            ) as client:
                res = client.post("/api/tokens", json=self.request_body(spec))
        except httpx.HTTPError as ex:
            raise GatewayError(f"Ledger request failed: {ex}") from ex

        if res.status_code >= 400:
            raise GatewayError(f"Ledger rejected token create: {res.status_code} {res.text}")

        try:
            data = res.json()
        except ValueError as ex:
            raise GatewayError(f"Ledger returned invalid JSON: {res.text}") from ex

        token_id = str(data.get("tokenId") or "").strip() if isinstance(data, dict) else ""
        if not token_id:
            raise GatewayError(f"Ledger response missing tokenId: {data}")
        return token_id
