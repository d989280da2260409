"""Add-recipe view — the upload form inside the modal window."""

from __future__ import annotations

from typing import Any

from engine.kernel.types import Node
from forkify.views.templates import render_tree

INGREDIENT_FIELDS = 6

RECIPE_FIELDS: list[tuple[str, str, str]] = [
    ("title", "Title", "text"),
    ("sourceUrl", "URL", "text"),
    ("image", "Image URL", "text"),
    ("publisher", "Publisher", "text"),
    ("cookingTime", "Prep time", "number"),
    ("servings", "Servings", "number"),
]

UPLOAD_TEMPLATE = """
<form class="upload">
  <div class="upload__column">
    <h3 class="upload__heading">Recipe data</h3>
    {{#fields}}
    <label>{{label}}</label>
    <input value="{{value}}" required name="{{name}}" type="{{type}}" />
    {{/fields}}
  </div>
  <div class="upload__column">
    <h3 class="upload__heading">Ingredients</h3>
    {{#ingredients}}
    <label>Ingredient {{n}}</label>
    <input value="{{value}}" type="text" name="ingredient-{{n}}" placeholder="Format: 'Quantity,Unit,Description'" />
    {{/ingredients}}
  </div>
  <button class="btn upload__btn">
    <svg><use href="{{icons}}#icon-upload-cloud"></use></svg>
    <span>Upload</span>
  </button>
</form>
"""


def empty_form() -> dict[str, str]:
    """Form values for a blank upload form."""
    values = {name: "" for name, _, _ in RECIPE_FIELDS}
    values.update({f"ingredient-{n}": "" for n in range(1, INGREDIENT_FIELDS + 1)})
    return values


class AddRecipeView:
    error_message = "Could not upload that recipe. Please check the form and try again!"
    message = "Recipe was successfully uploaded!"

    def produce_markup(self, values: dict[str, Any]) -> Node:
        context = {
            "fields": [
                {"name": name, "label": label, "type": type_, "value": values.get(name, "")}
                for name, label, type_ in RECIPE_FIELDS
            ],
            "ingredients": [
                {"n": n, "value": values.get(f"ingredient-{n}", "")} for n in range(1, INGREDIENT_FIELDS + 1)
            ],
        }
        return render_tree(UPLOAD_TEMPLATE, context)
