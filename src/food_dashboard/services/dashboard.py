"""Dashboard service keeping the local food list in step with the foods API."""

import asyncio
import logging
from dataclasses import dataclass, field

from food_dashboard.adapters.foods_client import FoodsGateway
from food_dashboard.domain.errors import GatewayError, GatewayHTTPError
from food_dashboard.domain.foods import (
    FoodPlate,
    FoodPlateDraft,
    FoodPlateEdit,
    merge_edit,
)
from food_dashboard.services.modals import ModalCoordinator
from food_dashboard.services.store import FoodStore

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardError:
    """Failure indicator shown next to the list."""

    action: str
    message: str
    status_code: int | None = None

    @classmethod
    def from_gateway_error(cls, exc: GatewayError) -> "DashboardError":
        status_code = exc.status_code if isinstance(exc, GatewayHTTPError) else None
        return cls(action=exc.action, message=exc.message, status_code=status_code)


@dataclass(frozen=True)
class DashboardView:
    """Read-only snapshot of everything the dashboard renders."""

    foods: tuple[FoodPlate, ...]
    create_modal_open: bool
    edit_modal_open: bool
    editing_target: FoodPlate | None
    loaded: bool
    error: DashboardError | None


@dataclass
class DashboardService:
    """Applies user actions to the foods API, then to the local store.

    The store is only mutated after the matching API call succeeded. Gateway
    failures are logged and kept as ``error`` for display; they never leave
    the store ahead of the server. The next successful action clears it.

    Actions hold ``_lock`` across their API call, so a reload cannot replace
    the list with a snapshot taken before a concurrent create finished.
    """

    gateway: FoodsGateway
    store: FoodStore = field(default_factory=FoodStore)
    modals: ModalCoordinator = field(default_factory=ModalCoordinator)
    loaded: bool = False
    error: DashboardError | None = None
    _closed: bool = field(default=False, init=False, repr=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Tear the dashboard down; late API responses are then dropped."""
        self._closed = True

    def view(self) -> DashboardView:
        """Return a snapshot of the current dashboard state."""
        return DashboardView(
            foods=self.store.snapshot(),
            create_modal_open=self.modals.create_modal_open,
            edit_modal_open=self.modals.edit_modal_open,
            editing_target=self.modals.editing_target,
            loaded=self.loaded,
            error=self.error,
        )

    def dismiss_error(self) -> None:
        self.error = None

    async def load(self) -> bool:
        """Fetch the whole collection and replace the local list."""
        async with self._lock:
            if self._closed:
                return False
            try:
                foods = await self.gateway.list_foods()
            except GatewayError as exc:
                self._fail(exc)
                return False
            if not self._alive("load"):
                return False
            self.store.replace_all(foods)
            self.loaded = True
            self.error = None
            _logger.info("Loaded foods: count=%s", len(foods))
            return True

    async def add_food(self, draft: FoodPlateDraft) -> FoodPlate | None:
        """Create a food and append the server's record to the list."""
        async with self._lock:
            if self._closed:
                return None
            try:
                created = await self.gateway.create_food(draft)
            except GatewayError as exc:
                self._fail(exc)
                return None
            if not self._alive("create"):
                return None
            self.store.append(created)
            self.error = None
            _logger.info("Created food: id=%s", created.id)
            return created

    async def update_food(self, edit: FoodPlateEdit) -> FoodPlate | None:
        """Merge an edit onto the editing target and save the result."""
        async with self._lock:
            target = self.modals.editing_target
            if target is None:
                _logger.warning("Update requested without an editing target")
                return None
            return await self._save(merge_edit(target, edit))

    async def save_food(self, food: FoodPlate) -> FoodPlate | None:
        """Send a full record to the API and replace it locally on success."""
        async with self._lock:
            return await self._save(food)

    async def toggle_available(self, food_id: int) -> FoodPlate | None:
        """Flip availability of a listed food through the update path."""
        async with self._lock:
            current = self.store.get(food_id)
            if current is None:
                _logger.warning("Toggle requested for unknown food: id=%s", food_id)
                return None
            return await self._save(
                merge_edit(current, FoodPlateEdit(available=not current.available))
            )

    async def delete_food(self, food_id: int) -> bool:
        """Delete a food remotely, then drop it from the list."""
        async with self._lock:
            if self._closed:
                return False
            try:
                await self.gateway.delete_food(food_id)
            except GatewayError as exc:
                self._fail(exc)
                return False
            if not self._alive("delete"):
                return False
            self.store.remove_by_id(food_id)
            self.error = None
            _logger.info("Deleted food: id=%s", food_id)
            return True

    def select_for_edit(self, food_id: int) -> FoodPlate | None:
        """Open the edit modal for a listed food."""
        food = self.store.get(food_id)
        if food is None:
            return None
        self.modals.select_for_edit(food)
        return food

    async def _save(self, food: FoodPlate) -> FoodPlate | None:
        if self._closed:
            return None
        try:
            await self.gateway.update_food(food.id, food)
        except GatewayError as exc:
            self._fail(exc)
            return None
        if not self._alive("update"):
            return None
        self.store.update_by_id(food.id, food)
        target = self.modals.editing_target
        if target is not None and target.id == food.id:
            self.modals.editing_target = food
        self.error = None
        _logger.info("Updated food: id=%s", food.id)
        return food

    def _fail(self, exc: GatewayError) -> None:
        _logger.warning("Foods API %s failed: %s", exc.action, exc.message)
        if not self._closed:
            self.error = DashboardError.from_gateway_error(exc)

    def _alive(self, action: str) -> bool:
        if self._closed:
            _logger.info("Dropping %s response after dashboard teardown", action)
            return False
        return True
