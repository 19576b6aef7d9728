"""Visibility state for the create and edit modals."""

from dataclasses import dataclass

from food_dashboard.domain.foods import FoodPlate


@dataclass
class ModalCoordinator:
    """Tracks two independent modal flags and the record being edited."""

    create_modal_open: bool = False
    edit_modal_open: bool = False
    editing_target: FoodPlate | None = None

    def open_create(self) -> None:
        self.create_modal_open = True

    def close_create(self) -> None:
        self.create_modal_open = False

    def toggle_create(self) -> None:
        self.create_modal_open = not self.create_modal_open

    def open_edit(self) -> None:
        self.edit_modal_open = True

    def close_edit(self) -> None:
        self.edit_modal_open = False

    def toggle_edit(self) -> None:
        self.edit_modal_open = not self.edit_modal_open

    def select_for_edit(self, food: FoodPlate) -> None:
        """Load a record into the edit workflow and show the edit modal."""
        self.editing_target = food
        self.edit_modal_open = True
