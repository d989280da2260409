"""Pagination view — previous/next buttons for the search results."""

from __future__ import annotations

from typing import Any

from engine.kernel.types import Node
from forkify.views.templates import render_tree

PAGINATION_TEMPLATE = """
{{#prev}}
<button data-goto="{{page}}" class="btn--inline pagination__btn--prev">
  <svg class="search__icon"><use href="{{icons}}#icon-arrow-left"></use></svg>
  <span>Page {{page}}</span>
</button>
{{/prev}}
{{#next}}
<button data-goto="{{page}}" class="btn--inline pagination__btn--next">
  <span>Page {{page}}</span>
  <svg class="search__icon"><use href="{{icons}}#icon-arrow-right"></use></svg>
</button>
{{/next}}
"""


def num_pages(total: int, per_page: int) -> int:
    return max(1, -(-total // per_page))


class PaginationView:
    """A previous button past page 1, a next button before the last page."""

    error_message = ""
    message = ""

    def produce_markup(self, search: dict[str, Any]) -> Node:
        pages = num_pages(len(search["results"]), search["resultsPerPage"])
        page = search["page"]
        context = {
            "prev": {"page": page - 1} if page > 1 else None,
            "next": {"page": page + 1} if page < pages else None,
        }
        return render_tree(PAGINATION_TEMPLATE, context)

    @staticmethod
    def goto_pages(mount) -> list[int]:
        """Target pages of the buttons currently on screen."""
        return [int(btn.attributes["data-goto"]) for btn in mount.find_all("btn--inline")]
