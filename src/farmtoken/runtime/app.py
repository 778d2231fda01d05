from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app
from ..config import Settings
from ..core.registry import FarmRegistry
from ..core.tokenisation import TokenisationCoordinator
from ..ledger import LedgerGateway, build_gateway, operator_from_settings


def create_app(
    settings: Settings | None = None,
    *,
    registry: FarmRegistry | None = None,
    gateway: LedgerGateway | None = None,
) -> FastAPI:
    """Wire registry, ledger gateway and coordinator into the HTTP app.

    Each call builds a fresh registry unless one is passed in, so the registry
    lives exactly as long as the app that owns it.
    """

    settings = settings or Settings.from_env()
    registry = registry if registry is not None else FarmRegistry()
    gateway = gateway if gateway is not None else build_gateway(settings)

    coordinator = TokenisationCoordinator(
        registry,
        gateway,
        operator_from_settings(settings),
        timeout_s=settings.ledger_timeout_s,
    )
    app = create_api_app(registry, coordinator, cors_origins=settings.cors_origins)
    app.state.settings = settings
    app.state.gateway = gateway
    return app
