"""Tests for container wiring."""

import asyncio

from food_dashboard.adapters.foods_client import HttpxFoodsClient
from food_dashboard.config import Settings
from food_dashboard.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.foods_client, HttpxFoodsClient)
    assert container.foods_client.base_url == "http://foods.test"
    assert container.dashboard_service.gateway is container.foods_client
    asyncio.run(container.close_resources())


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("FOODS_API_BASE_URL", "http://api.example")
    monkeypatch.setenv("FOODS_API_TIMEOUT_SECONDS", "2.5")

    settings = Settings()

    assert settings.foods_api_base_url == "http://api.example"
    assert settings.foods_api_timeout_seconds == 2.5
