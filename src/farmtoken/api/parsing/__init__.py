from __future__ import annotations

from .farms import RegistrationRequest, parse_registration_body

__all__ = ["RegistrationRequest", "parse_registration_body"]
