"""Recipe models: API payloads in, view entities out."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class IngredientFormatError(ValueError):
    """An ingredient form field is not 'quantity,unit,description'."""

    def __init__(self, field_name: str = "") -> None:
        super().__init__("Wrong ingredient format! Please use the correct format.")
        self.field_name = field_name


class Ingredient(BaseModel):
    """One ingredient line. quantity is None for 'to taste' style lines."""

    quantity: float | None = None
    unit: str | None = None
    description: str = ""

    def to_entity(self) -> dict[str, Any]:
        return {
            "quantity": self.quantity,
            "unit": self.unit or "",
            "description": self.description,
        }


class Recipe(BaseModel):
    """A full recipe as the API returns it."""

    id: str
    title: str
    publisher: str = ""
    source_url: str = ""
    image_url: str = ""
    servings: int = Field(gt=0)
    cooking_time: int = Field(ge=0)
    ingredients: list[Ingredient] = Field(default_factory=list)
    key: str | None = None  # present only on user-uploaded recipes

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> Recipe:
        """Build from the API envelope {"data": {"recipe": {...}}}."""
        return cls.model_validate(data["data"]["recipe"])

    def to_entity(self, bookmarked: bool = False) -> dict[str, Any]:
        entity: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "publisher": self.publisher,
            "sourceUrl": self.source_url,
            "image": self.image_url,
            "servings": self.servings,
            "cookingTime": self.cooking_time,
            "ingredients": [i.to_entity() for i in self.ingredients],
            "bookmarked": bookmarked,
        }
        if self.key:
            entity["key"] = self.key
        return entity


class SearchResult(BaseModel):
    """A search hit — just enough for a preview."""

    id: str
    title: str
    publisher: str = ""
    image_url: str = ""
    key: str | None = None

    @classmethod
    def list_from_response(cls, data: dict[str, Any]) -> list[SearchResult]:
        """Build from the API envelope {"data": {"recipes": [...]}}."""
        return [cls.model_validate(r) for r in data["data"]["recipes"]]

    def to_entity(self) -> dict[str, Any]:
        entity: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "publisher": self.publisher,
            "image": self.image_url,
        }
        if self.key:
            entity["key"] = self.key
        return entity


class NewRecipeForm(BaseModel):
    """What the upload form submits. Ingredient fields are named ingredient-N."""

    model_config = {"populate_by_name": True}

    title: str = Field(min_length=1, max_length=200)
    source_url: str = Field(alias="sourceUrl", min_length=1)
    image: str = Field(min_length=1)
    publisher: str = Field(min_length=1)
    cooking_time: int = Field(alias="cookingTime", gt=0)
    servings: int = Field(gt=0)
    ingredients: list[Ingredient] = Field(default_factory=list)

    @classmethod
    def from_form(cls, fields: dict[str, str]) -> NewRecipeForm:
        """
        Build from raw form fields.

        Non-empty ingredient-N fields are parsed in form order; each must be
        "quantity,unit,description" (quantity and unit may be blank).
        Raises IngredientFormatError or pydantic.ValidationError.
        """
        ingredients = [
            parse_ingredient(value, name)
            for name, value in fields.items()
            if name.startswith("ingredient-") and value.strip()
        ]
        data = {k: v for k, v in fields.items() if not k.startswith("ingredient-")}
        return cls.model_validate({**data, "ingredients": ingredients})

    def to_payload(self) -> dict[str, Any]:
        """The snake_case body the API expects."""
        return {
            "title": self.title,
            "source_url": self.source_url,
            "image_url": self.image,
            "publisher": self.publisher,
            "cooking_time": self.cooking_time,
            "servings": self.servings,
            "ingredients": [i.model_dump() for i in self.ingredients],
        }


def parse_ingredient(value: str, field_name: str = "") -> Ingredient:
    """'0.5,kg,Rice' → Ingredient(quantity=0.5, unit='kg', description='Rice')."""
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 3:
        raise IngredientFormatError(field_name)
    quantity, unit, description = parts
    try:
        qty = float(quantity) if quantity else None
    except ValueError:
        raise IngredientFormatError(field_name) from None
    return Ingredient(quantity=qty, unit=unit or None, description=description)
