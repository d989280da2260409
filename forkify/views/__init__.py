"""
Forkify views — one markup producer per mount point.

Each view is a plain class with produce_markup(entity) -> Node and its
error/info message texts; engine.kernel.ViewController does the rest.
"""

from forkify.views.add_recipe import AddRecipeView
from forkify.views.bookmarks import BookmarksView
from forkify.views.pagination import PaginationView
from forkify.views.preview import PreviewView
from forkify.views.recipe import RecipeView
from forkify.views.results import ResultsView

__all__ = [
    "AddRecipeView",
    "BookmarksView",
    "PaginationView",
    "PreviewView",
    "RecipeView",
    "ResultsView",
]
