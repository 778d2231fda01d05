from __future__ import annotations

from typing import Any

from ...core.errors import FarmTokenError, TokenisationError
from ...core.farms import FarmRecord


def farm_to_dict(f: FarmRecord) -> dict[str, Any]:
    return {
        "id": f.id,
        "name": f.name,
        "location": f.location,
        "hectares": float(f.area_hectares),
        "estimatedValue": f.appraised_value,
        "maxTokenisableValue": int(f.max_tokenisable_value),
        "tokenSymbol": f.token_symbol,
        "tokenName": f.token_name,
        "tokenId": f.external_token_id,
        "status": f.status.value,
        "createdAt": float(f.created_at),
        "tokenisedAt": float(f.tokenised_at) if f.tokenised_at is not None else None,
    }


def error_to_dict(err: FarmTokenError) -> dict[str, Any]:
    out: dict[str, Any] = {"error": err.kind, "detail": err.detail}
    if isinstance(err, TokenisationError) and err.cause is not None:
        out["cause"] = str(err.cause) or type(err.cause).__name__
    return out
