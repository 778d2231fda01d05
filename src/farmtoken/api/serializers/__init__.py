from __future__ import annotations

from .farms import error_to_dict, farm_to_dict

__all__ = ["farm_to_dict", "error_to_dict"]
