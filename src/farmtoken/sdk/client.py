from __future__ import annotations

from typing import Any

import httpx


class FarmTokenClient:
    """HTTP client for a running farmtoken server.

    Contract (current):
    - GET  /health
    - GET  /api/farms
    - GET  /api/farms/{id}
    - POST /api/farms                 (JSON)
    - POST /api/farms/{id}/tokenise
    """

    def __init__(self, base_url: str = "http://127.0.0.1:4000") -> None:
        self.base_url = base_url.rstrip("/")

    @staticmethod
    def _raise_for(res: httpx.Response, what: str) -> None:
        if res.status_code >= 400:
            raise RuntimeError(f"{what} failed: {res.status_code} {res.text}")

    def is_alive(self, *, timeout_s: float = 0.2) -> bool:
        try:
            return self.health(timeout_s=timeout_s).get("status") == "ok"
        except (httpx.HTTPError, RuntimeError, ValueError):
            return False

    def health(self, *, timeout_s: float = 10.0) -> dict[str, Any]:
        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get("/health")
            self._raise_for(res, "Health check")
            return res.json()

    def list_farms(self, *, timeout_s: float = 10.0) -> list[dict[str, Any]]:
        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get("/api/farms")
            self._raise_for(res, "List farms")
            return list(res.json().get("farms") or [])

    def get_farm(self, farm_id: str, *, timeout_s: float = 10.0) -> dict[str, Any]:
        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get(f"/api/farms/{farm_id}")
            self._raise_for(res, "Get farm")
            return res.json()["farm"]

    def register_farm(
        self,
        name: str,
        location: str,
        estimated_value: int | float,
        *,
        hectares: float | None = None,
        token_symbol: str | None = None,
        token_name: str | None = None,
        timeout_s: float = 10.0,
    ) -> dict[str, Any]:
        """Register a farm and return its record."""

        body: dict[str, Any] = {
            "name": name,
            "location": location,
            "estimatedValue": estimated_value,
        }
        if hectares is not None:
            body["hectares"] = float(hectares)
        if token_symbol is not None:
            body["tokenSymbol"] = token_symbol
        if token_name is not None:
            body["tokenName"] = token_name

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.post("/api/farms", json=body)
            self._raise_for(res, "Register farm")
            return res.json()["farm"]

    def tokenise_farm(self, farm_id: str, *, timeout_s: float = 60.0) -> dict[str, Any]:
        """Tokenise a farm. Safe to call again after success or failure.

        Returns the full response: `farm`, `tokenId` and, when nothing was
        issued because the farm was already tokenised, `message`.
        """

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.post(f"/api/farms/{farm_id}/tokenise")
            self._raise_for(res, "Tokenise farm")
            return res.json()
