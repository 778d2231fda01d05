from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol


SupplyType = Literal["finite", "infinite"]


class GatewayError(Exception):
    """Any failure talking to the ledger: transport, signing or rejection."""


@dataclass(frozen=True)
class OperatorIdentity:
    """Account that signs token creation and acts as treasury."""

    account_id: str
    network: str = "testnet"

    def __post_init__(self) -> None:
        if not str(self.account_id).strip():
            raise ValueError("account_id cannot be empty")


@dataclass(frozen=True, kw_only=True)
class TokenSpec:
    """Parameters of one fungible asset to create on the ledger."""

    name: str
    symbol: str
    initial_supply: int
    max_supply: int
    issuer: OperatorIdentity
    supply_type: SupplyType = "finite"
    decimals: int = 0

    def __post_init__(self) -> None:
        if int(self.initial_supply) < 0:
            raise ValueError("initial_supply must be >= 0")
        if self.supply_type == "finite" and int(self.initial_supply) > int(self.max_supply):
            raise ValueError("initial_supply cannot exceed max_supply for a finite token")
        if int(self.decimals) < 0:
            raise ValueError("decimals must be >= 0")


class LedgerGateway(Protocol):
    def create_fungible_asset(self, spec: TokenSpec) -> str:
        """Create the asset and return its ledger-assigned token id.

        Raises GatewayError on failure. May block on network I/O.
        """
        ...
