"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from food_dashboard.adapters.foods_client import FoodsGateway
from food_dashboard.config import Settings
from food_dashboard.containers import AppContainer
from food_dashboard.domain.errors import GatewayError
from food_dashboard.domain.foods import FoodPlate, FoodPlateDraft
from food_dashboard.services.dashboard import DashboardService
from food_dashboard.services.modals import ModalCoordinator
from food_dashboard.services.store import FoodStore


@dataclass
class InMemoryFoodsGateway(FoodsGateway):
    """In-memory foods API that can be told to fail."""

    foods: list[FoodPlate] = field(default_factory=list)
    failures: dict[str, GatewayError] = field(default_factory=dict)
    calls: list[tuple[str, object]] = field(default_factory=list)
    next_id: int = 1

    async def list_foods(self) -> list[FoodPlate]:
        self._record("list", None)
        return list(self.foods)

    async def create_food(self, draft: FoodPlateDraft) -> FoodPlate:
        self._record("create", draft)
        food = FoodPlate(
            id=self.next_id,
            name=draft.name,
            image=draft.image,
            price=draft.price,
            description=draft.description,
            available=True,
        )
        self.next_id += 1
        self.foods.append(food)
        return food

    async def update_food(self, food_id: int, food: FoodPlate) -> None:
        self._record("update", (food_id, food))
        self.foods = [food if item.id == food_id else item for item in self.foods]

    async def delete_food(self, food_id: int) -> None:
        self._record("delete", food_id)
        self.foods = [item for item in self.foods if item.id != food_id]

    def _record(self, action: str, argument: object) -> None:
        self.calls.append((action, argument))
        error = self.failures.get(action)
        if error is not None:
            raise error


def make_food(food_id: int, name: str = "Pizza", available: bool = True) -> FoodPlate:
    return FoodPlate(
        id=food_id,
        name=name,
        image=f"{name.lower()}.png",
        price="30.00",
        description=f"Tasty {name.lower()}",
        available=available,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(foods_api_base_url="http://foods.test")


@pytest.fixture
def gateway() -> InMemoryFoodsGateway:
    return InMemoryFoodsGateway()


@pytest.fixture
def dashboard(gateway: InMemoryFoodsGateway) -> DashboardService:
    return DashboardService(gateway=gateway)


@pytest.fixture
def container(settings: Settings, gateway: InMemoryFoodsGateway) -> AppContainer:
    dashboard_service = DashboardService(
        gateway=gateway,
        store=FoodStore(),
        modals=ModalCoordinator(),
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        foods_client=gateway,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
