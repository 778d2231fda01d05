from __future__ import annotations

import logging

from ..config import Settings
from .gateway import GatewayError, LedgerGateway, OperatorIdentity, SupplyType, TokenSpec
from .http import HttpLedgerGateway
from .simulated import SimulatedLedgerGateway

logger = logging.getLogger(__name__)

SIMULATED_OPERATOR_ID = "0.0.2"


def operator_from_settings(settings: Settings) -> OperatorIdentity:
    return OperatorIdentity(
        account_id=settings.operator_id or SIMULATED_OPERATOR_ID,
        network=settings.network,
    )


def build_gateway(settings: Settings) -> LedgerGateway:
    """Pick the ledger gateway for the configured environment."""

    if not settings.has_operator:
        logger.warning("OPERATOR_ID or OPERATOR_KEY missing; using the simulated ledger")
        return SimulatedLedgerGateway()

    if not settings.ledger_url:
        logger.warning("LEDGER_URL not set; using the simulated ledger")
        return SimulatedLedgerGateway()

    return HttpLedgerGateway(
        settings.ledger_url,
        operator_key=settings.operator_key,
        timeout_s=settings.ledger_timeout_s,
    )


__all__ = [
    "GatewayError",
    "LedgerGateway",
    "OperatorIdentity",
    "SupplyType",
    "TokenSpec",
    "HttpLedgerGateway",
    "SimulatedLedgerGateway",
    "build_gateway",
    "operator_from_settings",
]
