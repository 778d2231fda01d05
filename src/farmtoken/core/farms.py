from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any


TOKENISABLE_FRACTION = Decimal("0.25")
DEFAULT_TOKEN_SYMBOL = "FARM"
# Largest accepted appraised value; keeps the issuance quantity within a signed 64-bit supply.
MAX_APPRAISED_VALUE = 10**18

_WHITESPACE_RE = re.compile(r"\s+")
_INVALID_ID_CHARS_RE = re.compile(r"[^a-z0-9-]")


class FarmStatus(str, Enum):
    REGISTERED = "registered"
    TOKENISED = "tokenised"


@dataclass(frozen=True, kw_only=True)
class FarmRecord:
    """One registered farm.

    Notes:
    - Records are immutable values; the registry swaps in a new instance on the
      single allowed transition (registered -> tokenised).
    - `max_tokenisable_value` is fixed at registration and doubles as the
      token issuance quantity (1 token per currency unit).
    """

    id: str
    name: str
    location: str
    appraised_value: int | float
    max_tokenisable_value: int
    token_symbol: str
    token_name: str
    area_hectares: float = 0.0
    external_token_id: str | None = None
    status: FarmStatus = FarmStatus.REGISTERED
    created_at: float = 0.0
    tokenised_at: float | None = None

    @property
    def is_tokenised(self) -> bool:
        return self.status is FarmStatus.TOKENISED

    @property
    def issuance_quantity(self) -> int:
        return int(self.max_tokenisable_value)


def max_tokenisable_value(appraised_value: int | float) -> int:
    """25% of the appraised value, rounded half-up to a whole currency unit."""

    try:
        value = Decimal(str(appraised_value))
    except InvalidOperation as ex:
        raise ValueError(f"Invalid appraised value: {appraised_value!r}") from ex
    return int((value * TOKENISABLE_FRACTION).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def slugify_farm_name(name: str) -> str:
    """Lowercase, hyphenate whitespace runs and drop anything outside [a-z0-9-]."""

    s = _WHITESPACE_RE.sub("-", str(name).lower())
    return _INVALID_ID_CHARS_RE.sub("", s)


def parse_appraised_value(value: Any) -> int | float:
    """Validate an appraised value, keeping integers exact.

    Integers and numeric strings go through `Decimal`, never `float`, so the
    ceiling is computed on the value the caller sent.
    """

    if value is None:
        raise ValueError("estimatedValue is required")
    if isinstance(value, bool):
        raise ValueError("estimatedValue must be a number")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValueError("estimatedValue is required")

    if isinstance(value, float):
        d = Decimal(repr(value)) if math.isfinite(value) else None
    elif isinstance(value, (int, str)):
        try:
            d = Decimal(value)
        except (InvalidOperation, ValueError) as ex:
            raise ValueError("estimatedValue must be a number") from ex
    else:
        raise ValueError("estimatedValue must be a number")

    if d is None or not d.is_finite() or d <= 0:
        raise ValueError("estimatedValue must be a positive number")
    if d > MAX_APPRAISED_VALUE:
        raise ValueError(f"estimatedValue must not exceed {MAX_APPRAISED_VALUE}")

    if d == d.to_integral_value():
        return int(d)
    return value if isinstance(value, float) else float(d)


def parse_area_hectares(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        raise ValueError("hectares must be a number")
    try:
        v = float(value)
    except (TypeError, ValueError, OverflowError) as ex:
        raise ValueError("hectares must be a number") from ex
    if not math.isfinite(v) or v < 0:
        raise ValueError("hectares must be a non-negative number")
    return v
