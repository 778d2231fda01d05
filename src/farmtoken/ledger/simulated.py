from __future__ import annotations

import threading

from .gateway import GatewayError, TokenSpec


class SimulatedLedgerGateway:
    """In-process ledger for local runs and tests.

    Token ids use the `shard.realm.num` format, e.g. `0.0.1001`.
    """

    def __init__(self, *, shard: int = 0, realm: int = 0, first_num: int = 1001) -> None:
        self._lock = threading.Lock()
        self._shard = int(shard)
        self._realm = int(realm)
        self._next_num = int(first_num)
        self._fail_next = 0
        self._issued: list[tuple[str, TokenSpec]] = []

    @property
    def calls(self) -> int:
        with self._lock:
            return len(self._issued)

    def issued(self) -> list[tuple[str, TokenSpec]]:
        with self._lock:
            return list(self._issued)

    def fail_next(self, count: int = 1) -> None:
        """Make the next `count` calls raise GatewayError."""
        with self._lock:
            self._fail_next = max(0, int(count))

    def create_fungible_asset(self, spec: TokenSpec) -> str:
        with self._lock:
            if self._fail_next > 0:
                self._fail_next -= 1
                raise GatewayError("simulated ledger rejection")

            token_id = f"{self._shard}.{self._realm}.{self._next_num}"
            self._next_num += 1
            self._issued.append((token_id, spec))
            return token_id
