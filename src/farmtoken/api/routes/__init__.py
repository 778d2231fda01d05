from __future__ import annotations

from .farms import mount_farms_api

__all__ = ["mount_farms_api"]
