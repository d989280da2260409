"""Recipe view — the full recipe card for the selected recipe."""

from __future__ import annotations

from typing import Any

from engine.kernel.types import Node
from forkify.views.templates import class_list, format_quantity, render_tree

RECIPE_TEMPLATE = """
<figure class="recipe__fig">
  <img src="{{image}}" alt="{{title}}" class="recipe__img" />
  <h1 class="recipe__title"><span>{{title}}</span></h1>
</figure>

<div class="recipe__details">
  <div class="recipe__info">
    <svg class="recipe__info-icon"><use href="{{icons}}#icon-clock"></use></svg>
    <span class="recipe__info-data recipe__info-data--minutes">{{cookingTime}}</span>
    <span class="recipe__info-text">minutes</span>
  </div>
  <div class="recipe__info">
    <svg class="recipe__info-icon"><use href="{{icons}}#icon-users"></use></svg>
    <span class="recipe__info-data recipe__info-data--people">{{servings}}</span>
    <span class="recipe__info-text">servings</span>
    <div class="recipe__info-buttons">
      <button data-update-to="{{servings_minus}}" class="btn--tiny btn--update-servings">
        <svg><use href="{{icons}}#icon-minus-circle"></use></svg>
      </button>
      <button data-update-to="{{servings_plus}}" class="btn--tiny btn--update-servings">
        <svg><use href="{{icons}}#icon-plus-circle"></use></svg>
      </button>
    </div>
  </div>
  <div class="{{user_generated_class}}">
    <svg><use href="{{icons}}#icon-user"></use></svg>
  </div>
  <button class="btn--round btn--bookmark">
    <svg><use href="{{icons}}#{{bookmark_icon}}"></use></svg>
  </button>
</div>

<div class="recipe__ingredients">
  <h2 class="heading--2">Recipe ingredients</h2>
  <ul class="recipe__ingredient-list">
    {{#ingredients}}
    <li class="recipe__ingredient">
      <svg class="recipe__icon"><use href="{{icons}}#icon-check"></use></svg>
      <div class="recipe__quantity">{{quantity_text}}</div>
      <div class="recipe__description">
        <span class="recipe__unit">{{unit}}</span>
        {{description}}
      </div>
    </li>
    {{/ingredients}}
  </ul>
</div>

<div class="recipe__directions">
  <h2 class="heading--2">How to cook it</h2>
  <p class="recipe__directions-text">
    This recipe was carefully designed and tested by
    <span class="recipe__publisher">{{publisher}}</span>. Please check out
    directions at their website.
  </p>
  <a class="btn--small recipe__btn" href="{{sourceUrl}}" target="_blank">
    <span>Directions</span>
    <svg class="search__icon"><use href="{{icons}}#icon-arrow-right"></use></svg>
  </a>
</div>
"""


class RecipeView:
    error_message = "We could not find that recipe. Please try another one!"
    message = ""

    def produce_markup(self, recipe: dict[str, Any]) -> Node:
        servings = recipe["servings"]
        context = {
            **recipe,
            "servings_minus": servings - 1,
            "servings_plus": servings + 1,
            "user_generated_class": class_list("recipe__user-generated", None if recipe.get("key") else "hidden"),
            "bookmark_icon": "icon-bookmark-fill" if recipe.get("bookmarked") else "icon-bookmark",
            "ingredients": [
                {**ing, "quantity_text": format_quantity(ing.get("quantity"))} for ing in recipe.get("ingredients", [])
            ],
        }
        return render_tree(RECIPE_TEMPLATE, context)
