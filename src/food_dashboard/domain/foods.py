"""Domain models for food plates."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class FoodPlate:
    """Represents a food plate exposed by the foods API."""

    id: int
    name: str
    image: str
    price: str
    description: str
    available: bool = True

    @classmethod
    def from_payload(cls, payload: dict[str, object]) -> "FoodPlate":
        """Build a food plate from an API JSON object.

        Missing or null text fields become ``""``; a missing or null
        ``available`` means ``True``. Any other non-boolean ``available``
        raises ``ValueError``.
        """
        available = payload.get("available")
        if available is None:
            available = True
        elif not isinstance(available, bool):
            raise ValueError(f"available must be a boolean, got {available!r}")
        return cls(
            id=int(payload["id"]),
            name=_text(payload.get("name")),
            image=_text(payload.get("image")),
            price=_text(payload.get("price")),
            description=_text(payload.get("description")),
            available=available,
        )

    def to_payload(self) -> dict[str, object]:
        """Return the full JSON body for this food plate."""
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "price": self.price,
            "description": self.description,
            "available": self.available,
        }


@dataclass(frozen=True)
class FoodPlateDraft:
    """Input for creating a food plate. The server assigns the id."""

    name: str
    image: str
    price: str
    description: str

    def to_payload(self) -> dict[str, object]:
        return {
            "name": self.name,
            "image": self.image,
            "price": self.price,
            "description": self.description,
            "available": True,
        }


@dataclass(frozen=True)
class FoodPlateEdit:
    """Partial edit of a food plate. Unset fields keep their current value."""

    name: str | None = None
    image: str | None = None
    price: str | None = None
    description: str | None = None
    available: bool | None = None

    def changes(self) -> dict[str, object]:
        """Return only the fields this edit sets."""
        return {
            key: value
            for key, value in (
                ("name", self.name),
                ("image", self.image),
                ("price", self.price),
                ("description", self.description),
                ("available", self.available),
            )
            if value is not None
        }


def merge_edit(target: FoodPlate, edit: FoodPlateEdit) -> FoodPlate:
    """Apply an edit onto the editing target; edited fields always win."""
    return replace(target, **edit.changes())


def _text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, dict | list):
        raise ValueError(f"expected a text value, got {value!r}")
    return str(value)
