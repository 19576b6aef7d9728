"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from food_dashboard.api.models import FoodPlateEditIn, FoodPlateIn
from food_dashboard.app_logging import configure_logging
from food_dashboard.containers import AppContainer
from food_dashboard.services.dashboard import DashboardService


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        dashboard: DashboardService = app.state.container.dashboard_service
        if not await dashboard.load():
            logger.warning("Dashboard started without foods: %s", dashboard.error)
        yield
        dashboard.close()
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/dashboard")
    async def dashboard_view(request: Request) -> dict[str, object]:
        """Return the current dashboard state."""
        return _view(_dashboard(request))

    @app.get("/dashboard/ui", response_class=HTMLResponse)
    async def dashboard_ui() -> HTMLResponse:
        """Minimal dashboard page that consumes the dashboard API."""
        return HTMLResponse(_DASHBOARD_UI_HTML)

    @app.post("/dashboard/reload")
    async def reload_foods(request: Request) -> dict[str, object]:
        """Fetch the foods collection again."""
        dashboard = _dashboard(request)
        if not await dashboard.load():
            _raise_gateway_failure(dashboard)
        return _view(dashboard)

    @app.post("/dashboard/modals/create")
    async def toggle_create_modal(request: Request) -> dict[str, object]:
        dashboard = _dashboard(request)
        dashboard.modals.toggle_create()
        return _view(dashboard)

    @app.post("/dashboard/modals/edit")
    async def toggle_edit_modal(request: Request) -> dict[str, object]:
        dashboard = _dashboard(request)
        dashboard.modals.toggle_edit()
        return _view(dashboard)

    @app.post("/dashboard/foods", status_code=status.HTTP_201_CREATED)
    async def add_food(body: FoodPlateIn, request: Request) -> dict[str, object]:
        """Create a food and close the create modal."""
        dashboard = _dashboard(request)
        if await dashboard.add_food(body.to_draft()) is None:
            _raise_gateway_failure(dashboard)
        dashboard.modals.close_create()
        return _view(dashboard)

    @app.post("/dashboard/foods/{food_id}/edit")
    async def select_food(food_id: int, request: Request) -> dict[str, object]:
        """Load a food into the edit modal."""
        dashboard = _dashboard(request)
        if dashboard.select_for_edit(food_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return _view(dashboard)

    @app.put("/dashboard/editing")
    async def update_food(
        body: FoodPlateEditIn, request: Request
    ) -> dict[str, object]:
        """Save the edit form onto the food being edited."""
        dashboard = _dashboard(request)
        if dashboard.modals.editing_target is None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="No food selected for editing",
            )
        if await dashboard.update_food(body.to_edit()) is None:
            _raise_gateway_failure(dashboard)
        dashboard.modals.close_edit()
        return _view(dashboard)

    @app.post("/dashboard/foods/{food_id}/availability")
    async def toggle_availability(
        food_id: int, request: Request
    ) -> dict[str, object]:
        """Flip whether a food is available."""
        dashboard = _dashboard(request)
        if dashboard.store.get(food_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        if await dashboard.toggle_available(food_id) is None:
            _raise_gateway_failure(dashboard)
        return _view(dashboard)

    @app.delete("/dashboard/foods/{food_id}")
    async def delete_food(food_id: int, request: Request) -> dict[str, object]:
        """Delete a food."""
        dashboard = _dashboard(request)
        if not await dashboard.delete_food(food_id):
            _raise_gateway_failure(dashboard)
        return _view(dashboard)

    @app.delete("/dashboard/error")
    async def dismiss_error(request: Request) -> dict[str, object]:
        dashboard = _dashboard(request)
        dashboard.dismiss_error()
        return _view(dashboard)

    return app


def _dashboard(request: Request) -> DashboardService:
    container: AppContainer = request.app.state.container
    return container.dashboard_service


def _view(dashboard: DashboardService) -> dict[str, object]:
    return asdict(dashboard.view())


def _raise_gateway_failure(dashboard: DashboardService) -> None:
    error = asdict(dashboard.error) if dashboard.error else None
    raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=error)


_DASHBOARD_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Food Dashboard</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      .error { color: #b00020; margin-bottom: 1rem; }
      .foods { display: grid; grid-template-columns: repeat(3, 1fr); gap: 1rem; }
      .food { border: 1px solid #ddd; border-radius: 8px; padding: 1rem; }
      .food.unavailable { opacity: 0.5; }
      .food img { max-width: 100%; height: 120px; object-fit: cover; }
      dialog form { display: grid; gap: 0.5rem; min-width: 320px; }
    </style>
  </head>
  <body>
    <header>
      <h1>Food Dashboard</h1>
      <button id="new-food">New plate</button>
    </header>
    <div id="error" class="error"></div>
    <div id="foods" class="foods" data-testid="foods-list"></div>

    <dialog id="create-modal">
      <form id="create-form">
        <h2>New plate</h2>
        <input name="image" placeholder="Image URL" />
        <input name="name" placeholder="Name" />
        <input name="price" placeholder="Price" />
        <input name="description" placeholder="Description" />
        <button type="submit">Add plate</button>
        <button type="button" data-close="create">Cancel</button>
      </form>
    </dialog>

    <dialog id="edit-modal">
      <form id="edit-form">
        <h2>Edit plate</h2>
        <input name="image" placeholder="Image URL" />
        <input name="name" placeholder="Name" />
        <input name="price" placeholder="Price" />
        <input name="description" placeholder="Description" />
        <button type="submit">Save</button>
        <button type="button" data-close="edit">Cancel</button>
      </form>
    </dialog>

    <script>
      const call = async (method, path, body) => {
        const response = await fetch(path, {
          method,
          headers: body ? { "Content-Type": "application/json" } : {},
          body: body ? JSON.stringify(body) : undefined,
        });
        const data = await response.json();
        if (!response.ok && response.status !== 502) {
          throw new Error(JSON.stringify(data));
        }
        return response.ok ? data : call("GET", "/dashboard");
      };

      const formBody = (form) => Object.fromEntries(new FormData(form).entries());

      const element = (tag, text) => {
        const node = document.createElement(tag);
        if (text !== undefined) node.textContent = text;
        return node;
      };

      const foodCard = (food) => {
        const item = element("div");
        item.className = food.available ? "food" : "food unavailable";

        const image = element("img");
        image.src = food.image;
        image.alt = food.name;
        const price = element("p");
        price.appendChild(element("b", `R$ ${food.price}`));

        const edit = element("button", "Edit");
        edit.onclick = () =>
          call("POST", `/dashboard/foods/${food.id}/edit`).then(render);
        const remove = element("button", "Delete");
        remove.onclick = () =>
          call("DELETE", `/dashboard/foods/${food.id}`).then(render);

        const toggle = element("input");
        toggle.type = "checkbox";
        toggle.checked = food.available;
        toggle.onchange = () =>
          call("POST", `/dashboard/foods/${food.id}/availability`).then(render);
        const label = element("label");
        label.append(toggle, food.available ? " Available" : " Unavailable");

        item.append(
          image,
          element("h3", food.name),
          element("p", food.description),
          price,
          edit,
          remove,
          label,
        );
        return item;
      };

      const render = (view) => {
        const error = document.getElementById("error");
        error.textContent = view.error
          ? `Could not ${view.error.action} foods: ${view.error.message}`
          : "";
        const list = document.getElementById("foods");
        list.replaceChildren();
        for (const food of view.foods) {
          list.appendChild(foodCard(food));
        }
        const createModal = document.getElementById("create-modal");
        const editModal = document.getElementById("edit-modal");
        if (view.create_modal_open && !createModal.open) createModal.showModal();
        if (!view.create_modal_open && createModal.open) createModal.close();
        if (view.edit_modal_open && !editModal.open) {
          const form = document.getElementById("edit-form");
          for (const key of ["image", "name", "price", "description"]) {
            form.elements[key].value = view.editing_target[key];
          }
          editModal.showModal();
        }
        if (!view.edit_modal_open && editModal.open) editModal.close();
      };

      document.getElementById("new-food").onclick = () =>
        call("POST", "/dashboard/modals/create").then(render);
      document.querySelectorAll("[data-close]").forEach((button) => {
        button.onclick = () =>
          call("POST", `/dashboard/modals/${button.dataset.close}`).then(render);
      });
      document.getElementById("create-form").onsubmit = (event) => {
        event.preventDefault();
        call("POST", "/dashboard/foods", formBody(event.target)).then(render);
      };
      document.getElementById("edit-form").onsubmit = (event) => {
        event.preventDefault();
        call("PUT", "/dashboard/editing", formBody(event.target)).then(render);
      };

      call("GET", "/dashboard").then(render);
    </script>
  </body>
</html>
"""
