"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_dashboard.adapters.foods_client import FoodsGateway, HttpxFoodsClient
from food_dashboard.config import Settings
from food_dashboard.services.dashboard import DashboardService
from food_dashboard.services.modals import ModalCoordinator
from food_dashboard.services.store import FoodStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    foods_client: FoodsGateway
    dashboard_service: DashboardService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    foods_client = HttpxFoodsClient.create(
        base_url=resolved_settings.foods_api_base_url,
        timeout=resolved_settings.foods_api_timeout_seconds,
    )
    dashboard_service = DashboardService(
        gateway=foods_client,
        store=FoodStore(),
        modals=ModalCoordinator(),
    )

    async def close_resources() -> None:
        await foods_client.close()

    return AppContainer(
        settings=resolved_settings,
        foods_client=foods_client,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
