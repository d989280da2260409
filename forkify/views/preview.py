"""Preview view — one search result or bookmark as a list item."""

from __future__ import annotations

from typing import Any

from engine.kernel.types import Node
from forkify.location import Location
from forkify.views.templates import class_list, render_tree

PREVIEW_TEMPLATE = """
<li class="preview">
  <a class="{{link_class}}" href="#{{id}}">
    <figure class="preview__fig"><img src="{{image}}" alt="{{title}}" /></figure>
    <div class="preview__data">
      <h4 class="preview__title">{{title}}</h4>
      <p class="preview__publisher">{{publisher}}</p>
      <div class="{{user_generated_class}}">
        <svg><use href="{{icons}}#icon-user"></use></svg>
      </div>
    </div>
  </a>
</li>
"""


class PreviewView:
    """Reads the selected recipe id from location; never changes it."""

    error_message = ""
    message = ""

    def __init__(self, location: Location | None = None) -> None:
        self.location = location or Location()

    def produce_markup(self, result: dict[str, Any]) -> Node:
        active = result["id"] == self.location.recipe_id
        context = {
            **result,
            "link_class": class_list("preview__link", "preview__link--active" if active else None),
            "user_generated_class": class_list("preview__user-generated", None if result.get("key") else "hidden"),
        }
        return render_tree(PREVIEW_TEMPLATE, context)
