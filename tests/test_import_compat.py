from __future__ import annotations


def test_top_level_exports() -> None:
    import farmtoken

    assert farmtoken.run is not None
    assert farmtoken.FarmTokenClient is not None
    assert farmtoken.FarmRegistry is not None
    assert farmtoken.TokenisationCoordinator is not None
    assert farmtoken.FarmStatus.TOKENISED.value == "tokenised"


def test_package_paths_work() -> None:
    from farmtoken.api import create_api_app
    from farmtoken.api.parsing import parse_registration_body
    from farmtoken.api.routes import mount_farms_api
    from farmtoken.api.serializers import farm_to_dict
    from farmtoken.core.registry import FarmRegistry
    from farmtoken.core.tokenisation import TokenisationCoordinator
    from farmtoken.ledger import HttpLedgerGateway, SimulatedLedgerGateway, build_gateway
    from farmtoken.runtime.server import FarmTokenServer, run, serve
    from farmtoken.sdk.client import FarmTokenClient

    assert create_api_app is not None
    assert parse_registration_body is not None
    assert mount_farms_api is not None
    assert farm_to_dict is not None
    assert FarmRegistry is not None
    assert TokenisationCoordinator is not None
    assert HttpLedgerGateway is not None
    assert SimulatedLedgerGateway is not None
    assert build_gateway is not None
    assert FarmTokenServer is not None
    assert run is not None
    assert serve is not None
    assert FarmTokenClient is not None
