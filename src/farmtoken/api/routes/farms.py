from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from ...core.registry import FarmRegistry
from ...core.tokenisation import TokenisationCoordinator
from ..parsing.farms import parse_registration_body
from ..serializers.farms import farm_to_dict


def mount_farms_api(app: FastAPI, registry: FarmRegistry, coordinator: TokenisationCoordinator) -> None:
    """Mount the farm registry endpoints.

    Domain errors propagate to the handlers installed by `create_api_app`.
    """

    @app.get("/api/farms")
    def list_farms() -> dict[str, Any]:
        return {"farms": [farm_to_dict(f) for f in registry.list_farms()]}

    @app.post("/api/farms", status_code=201)
    def register_farm(body: dict) -> dict[str, Any]:
        req = parse_registration_body(body)
        farm = registry.register(
            req.name,
            req.location,
            req.appraised_value,
            area_hectares=req.area_hectares,
            token_symbol=req.token_symbol,
            token_name=req.token_name,
        )
        return {"farm": farm_to_dict(farm)}

    @app.get("/api/farms/{farm_id}")
    def get_farm(farm_id: str) -> dict[str, Any]:
        return {"farm": farm_to_dict(registry.get(farm_id))}

    # Plain `def` so the (blocking) ledger call runs in the threadpool.
    @app.post("/api/farms/{farm_id}/tokenise")
    def tokenise_farm(farm_id: str) -> dict[str, Any]:
        result = coordinator.tokenise(farm_id)
        out: dict[str, Any] = {
            "farm": farm_to_dict(result.record),
            "tokenId": result.external_token_id,
        }
        if result.already_tokenised:
            out["message"] = "Farm already tokenised"
        return out
