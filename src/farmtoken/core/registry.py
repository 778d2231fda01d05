from __future__ import annotations

import contextlib
import threading
import time
from dataclasses import replace
from typing import Any, Iterator

from .errors import NotFoundError, ValidationError
from .farms import (
    DEFAULT_TOKEN_SYMBOL,
    FarmRecord,
    FarmStatus,
    max_tokenisable_value,
    parse_appraised_value,
    parse_area_hectares,
    slugify_farm_name,
)


class FarmRegistry:
    """Authoritative in-memory store of farm records.

    All reads and writes of the record map happen under `_lock`. Tokenisation
    additionally serialises per farm through `record_lock()`, which is a
    separate lock so a slow ledger call on one farm never blocks the others.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        # dict preserves insertion order, which is the registration order.
        self._farms: dict[str, FarmRecord] = {}
        self._record_locks: dict[str, threading.Lock] = {}

    def list_farms(self) -> list[FarmRecord]:
        with self._lock:
            return list(self._farms.values())

    def find(self, farm_id: str) -> FarmRecord | None:
        with self._lock:
            return self._farms.get(str(farm_id))

    def get(self, farm_id: str) -> FarmRecord:
        farm = self.find(farm_id)
        if farm is None:
            raise NotFoundError(f"Farm not found: {farm_id}")
        return farm

    def count(self) -> int:
        with self._lock:
            return len(self._farms)

    def _unique_id_locked(self, name: str) -> str:
        base = slugify_farm_name(name)
        candidate = base or f"farm-{len(self._farms) + 1}"
        base = candidate
        n = 1
        while candidate in self._farms:
            candidate = f"{base}-{n}"
            n += 1
        return candidate

    def register(
        self,
        name: Any,
        location: Any,
        appraised_value: Any,
        *,
        area_hectares: Any = None,
        token_symbol: Any = None,
        token_name: Any = None,
    ) -> FarmRecord:
        name_s = str(name).strip() if name is not None else ""
        location_s = str(location).strip() if location is not None else ""
        if not name_s or not location_s or appraised_value is None or appraised_value == "":
            raise ValidationError("name, location, estimatedValue are required")

        try:
            value = parse_appraised_value(appraised_value)
            hectares = parse_area_hectares(area_hectares)
        except ValueError as ex:
            raise ValidationError(str(ex)) from ex

        symbol = str(token_symbol).strip() if token_symbol is not None else ""
        display_name = str(token_name).strip() if token_name is not None else ""

        with self._lock:
            farm_id = self._unique_id_locked(name_s)
            farm = FarmRecord(
                id=farm_id,
                name=name_s,
                location=location_s,
                area_hectares=hectares,
                appraised_value=value,
                max_tokenisable_value=max_tokenisable_value(value),
                token_symbol=symbol or DEFAULT_TOKEN_SYMBOL,
                token_name=display_name or f"{name_s} Token",
                created_at=time.time(),
            )
            self._farms[farm_id] = farm
            return farm

    def mark_tokenised(self, farm_id: str, external_token_id: str) -> FarmRecord:
        """Commit the ledger token id. A second call is a no-op."""

        token_id = str(external_token_id or "").strip()
        if not token_id:
            raise ValidationError("external_token_id cannot be empty")

        with self._lock:
            current = self._farms.get(str(farm_id))
            if current is None:
                raise NotFoundError(f"Farm not found: {farm_id}")
            if current.is_tokenised:
                return current

            updated = replace(
                current,
                external_token_id=token_id,
                status=FarmStatus.TOKENISED,
                tokenised_at=time.time(),
            )
            self._farms[current.id] = updated
            return updated

    @contextlib.contextmanager
    def record_lock(self, farm_id: str) -> Iterator[None]:
        """Hold exclusive tokenisation rights for a single farm."""

        with self._lock:
            if str(farm_id) not in self._farms:
                raise NotFoundError(f"Farm not found: {farm_id}")
            lock = self._record_locks.setdefault(str(farm_id), threading.Lock())

        with lock:
            yield
