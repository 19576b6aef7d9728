"""Pydantic models for dashboard request bodies."""

from pydantic import BaseModel

from food_dashboard.domain.foods import FoodPlateDraft, FoodPlateEdit


class FoodPlateIn(BaseModel):
    """Body of the create form."""

    name: str
    image: str
    price: str
    description: str

    def to_draft(self) -> FoodPlateDraft:
        return FoodPlateDraft(
            name=self.name,
            image=self.image,
            price=self.price,
            description=self.description,
        )


class FoodPlateEditIn(BaseModel):
    """Body of the edit form; omitted fields are left untouched."""

    name: str | None = None
    image: str | None = None
    price: str | None = None
    description: str | None = None
    available: bool | None = None

    def to_edit(self) -> FoodPlateEdit:
        return FoodPlateEdit(
            name=self.name,
            image=self.image,
            price=self.price,
            description=self.description,
            available=self.available,
        )
