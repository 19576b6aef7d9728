"""Foods API client adapter."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from food_dashboard.domain.errors import (
    GatewayError,
    GatewayHTTPError,
    GatewayTransportError,
)
from food_dashboard.domain.foods import FoodPlate, FoodPlateDraft


class FoodsGateway(Protocol):
    """Interface for the remote foods collection resource."""

    async def list_foods(self) -> list[FoodPlate]:
        """Return every food plate in the collection."""

    async def create_food(self, draft: FoodPlateDraft) -> FoodPlate:
        """Create a food plate and return it with its server-assigned id."""

    async def update_food(self, food_id: int, food: FoodPlate) -> None:
        """Replace a food plate with the given full record."""

    async def delete_food(self, food_id: int) -> None:
        """Delete a food plate by id."""


@dataclass
class HttpxFoodsClient(FoodsGateway):
    """Foods API client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(cls, base_url: str, timeout: float = 10) -> "HttpxFoodsClient":
        """Create a foods client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def list_foods(self) -> list[FoodPlate]:
        """Fetch the collection with GET /foods."""
        response = await self._request("list", "GET", "/foods")
        payload = _json(response, "list")
        if not isinstance(payload, list):
            raise GatewayError("list", "Expected a JSON array of foods")
        try:
            return [FoodPlate.from_payload(item) for item in payload]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise GatewayError("list", f"Malformed food in response: {exc}") from exc

    async def create_food(self, draft: FoodPlateDraft) -> FoodPlate:
        """Create a food with POST /foods."""
        response = await self._request(
            "create", "POST", "/foods", json=draft.to_payload()
        )
        payload = _json(response, "create")
        if not isinstance(payload, dict):
            raise GatewayError("create", "Expected a JSON object for the new food")
        try:
            return FoodPlate.from_payload(payload)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise GatewayError("create", f"Malformed food in response: {exc}") from exc

    async def update_food(self, food_id: int, food: FoodPlate) -> None:
        """Replace a food with PUT /foods/{id}."""
        await self._request(
            "update", "PUT", f"/foods/{food_id}", json=food.to_payload()
        )

    async def delete_food(self, food_id: int) -> None:
        """Delete a food with DELETE /foods/{id}."""
        await self._request("delete", "DELETE", f"/foods/{food_id}")

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

    async def _request(
        self,
        action: str,
        method: str,
        path: str,
        json: dict[str, object] | None = None,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.request(
                method, url, json=json, timeout=self.timeout
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise GatewayHTTPError(
                action, f"{method} {path} returned {status_code}", status_code
            ) from exc
        except httpx.RequestError as exc:
            raise GatewayTransportError(
                action, f"{method} {path} failed: {exc!r}"
            ) from exc
        return response


def _json(response: httpx.Response, action: str) -> object:
    try:
        return response.json()
    except ValueError as exc:
        raise GatewayError(action, "Response body is not valid JSON") from exc
