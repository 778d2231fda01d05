from __future__ import annotations

from .client import FarmTokenClient

__all__ = ["FarmTokenClient"]
