from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...core.errors import ValidationError


@dataclass(frozen=True)
class RegistrationRequest:
    name: Any
    location: Any
    appraised_value: Any
    area_hectares: Any = None
    token_symbol: Any = None
    token_name: Any = None


def parse_registration_body(body: Any) -> RegistrationRequest:
    """Map the JSON body of `POST /api/farms` onto registry arguments.

    `estimatedValueGBP` is accepted as an alias of `estimatedValue`.
    Type checks on the values themselves are left to the registry.
    """

    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")

    value = body.get("estimatedValue")
    if value is None:
        value = body.get("estimatedValueGBP")

    return RegistrationRequest(
        name=body.get("name"),
        location=body.get("location"),
        appraised_value=value,
        area_hectares=body.get("hectares"),
        token_symbol=body.get("tokenSymbol"),
        token_name=body.get("tokenName"),
    )
