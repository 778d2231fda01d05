from __future__ import annotations

from .errors import FarmTokenError, NotFoundError, TokenisationError, ValidationError
from .farms import (
    DEFAULT_TOKEN_SYMBOL,
    TOKENISABLE_FRACTION,
    FarmRecord,
    FarmStatus,
    max_tokenisable_value,
    slugify_farm_name,
)
from .registry import FarmRegistry
from .tokenisation import TokenisationCoordinator, TokenisationResult

__all__ = [
    "DEFAULT_TOKEN_SYMBOL",
    "TOKENISABLE_FRACTION",
    "FarmRecord",
    "FarmStatus",
    "FarmRegistry",
    "TokenisationCoordinator",
    "TokenisationResult",
    "FarmTokenError",
    "ValidationError",
    "NotFoundError",
    "TokenisationError",
    "max_tokenisable_value",
    "slugify_farm_name",
]
