"""ASGI entrypoint for the food dashboard."""

from food_dashboard.api.app import create_app
from food_dashboard.containers import build_container

app = create_app(build_container())
