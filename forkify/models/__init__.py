"""
Data models for Forkify.

API payloads come in snake_case; view entities go out as camelCase dicts.
"""

from forkify.models.recipe import (
    Ingredient,
    IngredientFormatError,
    NewRecipeForm,
    Recipe,
    SearchResult,
)

__all__ = [
    "Ingredient",
    "IngredientFormatError",
    "NewRecipeForm",
    "Recipe",
    "SearchResult",
]
