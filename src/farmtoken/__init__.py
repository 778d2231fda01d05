from __future__ import annotations

from .config import Settings
from .core import (
    FarmRecord,
    FarmRegistry,
    FarmStatus,
    NotFoundError,
    TokenisationCoordinator,
    TokenisationError,
    TokenisationResult,
    ValidationError,
)
from .ledger import HttpLedgerGateway, OperatorIdentity, SimulatedLedgerGateway, TokenSpec
from .runtime.server import run
from .sdk.client import FarmTokenClient

__all__ = [
    "run",
    "Settings",
    "FarmTokenClient",
    "FarmRecord",
    "FarmRegistry",
    "FarmStatus",
    "TokenisationCoordinator",
    "TokenisationResult",
    "ValidationError",
    "NotFoundError",
    "TokenisationError",
    "OperatorIdentity",
    "TokenSpec",
    "HttpLedgerGateway",
    "SimulatedLedgerGateway",
]
