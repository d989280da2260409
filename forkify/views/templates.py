"""
Template helpers shared by the Forkify views.

Views are Mustache templates rendered with chevron, then parsed into a Node
tree for the kernel. Same entity in, same tree out.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any

import chevron

from engine.kernel.nodes import parse_markup
from engine.kernel.types import Node
from forkify.config import settings


def render_tree(template: str, context: dict[str, Any]) -> Node:
    """Render a Mustache template and parse the markup into a Node tree."""
    return parse_markup(chevron.render(template, {"icons": settings.ICONS_URL, **context}))


def class_list(*names: str | None) -> str:
    """Join the truthy class names with single spaces."""
    return " ".join(n for n in names if n)


def format_quantity(quantity: float | None) -> str:
    """
    Ingredient quantity as a kitchen fraction.

    0.5 → "1/2", 1.5 → "1 1/2", 2.0 → "2", None or 0 → "".
    """
    if not quantity:
        return ""
    frac = Fraction(quantity).limit_denominator(16)
    whole, rem = divmod(frac.numerator, frac.denominator)
    if rem == 0:
        return str(whole)
    part = f"{rem}/{frac.denominator}"
    return f"{whole} {part}" if whole else part
