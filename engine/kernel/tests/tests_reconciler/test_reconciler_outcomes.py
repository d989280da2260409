"""
View Kernel -- Reconciler Tests

reconcile(previous, next) pairs nodes by their pre-order index.

Covers:
  - Identical trees → NO_CHANGE
  - Text-only differences → PATCH with one text edit per changed leaf
  - Attribute differences → PATCH with the full new attribute set
  - Text and attribute edits together
  - Node count change (list grew or shrank) → INCOMPATIBLE
  - Kind mismatch, tag mismatch, child-count shift at equal length → INCOMPATIBLE
  - Identity-bearing values are compared by shape, not identity
  - Deeply nested trees are compared one node per index, without recursion
"""

from engine.kernel.nodes import flatten, parse_markup
from engine.kernel.reconciler import reconcile
from engine.kernel.types import INCOMPATIBLE, NO_CHANGE, PATCH, AttributeEdit, TextEdit, element, fragment, text_leaf


def card(title, href="#1", cls="card", items=("a", "b")):
    lis = "".join(f"<li>{i}</li>" for i in items)
    return parse_markup(f'<div class="{cls}"><h2><a href="{href}">{title}</a></h2><ul>{lis}</ul></div>')


# ============================================================================
# NO_CHANGE
# ============================================================================


class TestNoChange:
    def test_identical_trees(self):
        result = reconcile(card("Soup"), card("Soup"))

        assert result.outcome == NO_CHANGE
        assert result.text_edits == []
        assert result.attribute_edits == []

    def test_attribute_order_only(self):
        a = parse_markup('<a href="#1" class="x">t</a>')
        b = parse_markup('<a class="x" href="#1">t</a>')

        assert reconcile(a, b).outcome == NO_CHANGE

    def test_empty_fragments(self):
        assert reconcile(parse_markup(""), parse_markup("")).outcome == NO_CHANGE


# ============================================================================
# PATCH
# ============================================================================


class TestTextEdits:
    def test_single_text_change(self):
        prev, nxt = card("Soup"), card("Stew")

        result = reconcile(prev, nxt)

        assert result.outcome == PATCH
        assert result.attribute_edits == []
        assert len(result.text_edits) == 1
        edit = result.text_edits[0]
        assert edit.new_text == "Stew"
        assert flatten(prev)[edit.index].text == "Soup"

    def test_multiple_text_changes_in_order(self):
        result = reconcile(card("Soup", items=("a", "b")), card("Stew", items=("c", "d")))

        assert result.outcome == PATCH
        assert [e.new_text for e in result.text_edits] == ["Stew", "c", "d"]
        indexes = [e.index for e in result.text_edits]
        assert indexes == sorted(indexes)

    def test_edit_index_points_at_leaf(self):
        prev = card("Soup")

        result = reconcile(prev, card("Soup", items=("a", "z")))

        assert result.text_edits == [TextEdit(index=len(flatten(prev)) - 1, new_text="z")]


class TestAttributeEdits:
    def test_single_attribute_change(self):
        prev = card("Soup", href="#1")

        result = reconcile(prev, card("Soup", href="#2"))

        assert result.outcome == PATCH
        assert result.text_edits == []
        assert len(result.attribute_edits) == 1
        edit = result.attribute_edits[0]
        assert flatten(prev)[edit.index].tag == "a"
        assert edit.new_attributes == {"href": "#2"}

    def test_added_attribute(self):
        prev = parse_markup('<button class="btn">+</button>')
        nxt = parse_markup('<button class="btn" data-update-to="5">+</button>')

        result = reconcile(prev, nxt)

        assert result.attribute_edits == [AttributeEdit(index=1, new_attributes={"class": "btn", "data-update-to": "5"})]

    def test_removed_attribute_still_an_edit(self):
        prev = parse_markup('<a class="x" target="_blank">t</a>')
        nxt = parse_markup('<a class="x">t</a>')

        result = reconcile(prev, nxt)

        assert result.outcome == PATCH
        assert result.attribute_edits[0].new_attributes == {"class": "x"}

    def test_text_and_attribute_together(self):
        result = reconcile(card("Soup", href="#1"), card("Stew", href="#2"))

        assert result.outcome == PATCH
        assert len(result.text_edits) == 1
        assert len(result.attribute_edits) == 1
        assert result.edit_count == 2

    def test_ancestors_of_changed_leaf_produce_no_edit(self):
        result = reconcile(card("Soup"), card("Stew"))

        # div, h2, a all differ deeply but only the leaf is edited
        assert result.attribute_edits == []
        assert len(result.text_edits) == 1


class TestShapeNotIdentity:
    def test_different_id_same_shape_patches(self):
        prev = parse_markup('<a href="#1"><span>Stew</span></a>')
        nxt = parse_markup('<a href="#2"><span>Stew</span></a>')

        result = reconcile(prev, nxt)

        assert result.outcome == PATCH
        assert result.attribute_edits[0].new_attributes == {"href": "#2"}


# ============================================================================
# INCOMPATIBLE
# ============================================================================


class TestIncompatible:
    def test_list_gained_item(self):
        result = reconcile(card("Soup", items=("a", "b")), card("Soup", items=("a", "b", "c")))

        assert result.outcome == INCOMPATIBLE
        assert "node count" in result.reason
        assert result.text_edits == []

    def test_list_lost_item(self):
        result = reconcile(card("Soup", items=("a", "b")), card("Soup", items=("a",)))

        assert result.outcome == INCOMPATIBLE

    def test_kind_mismatch(self):
        prev = parse_markup("<p>x</p>")
        nxt = parse_markup("<p><b></b></p>")

        result = reconcile(prev, nxt)

        assert result.outcome == INCOMPATIBLE
        assert "kind mismatch" in result.reason

    def test_tag_mismatch(self):
        result = reconcile(parse_markup("<p>x</p>"), parse_markup("<div>x</div>"))

        assert result.outcome == INCOMPATIBLE
        assert "tag mismatch" in result.reason

    def test_child_count_shift_at_equal_length(self):
        # Same total node count, different nesting
        prev = parse_markup("<div><b></b><i></i></div><p></p>")
        nxt = parse_markup("<div><b></b></div><i></i><p></p>")

        assert len(flatten(prev)) == len(flatten(nxt))
        result = reconcile(prev, nxt)

        assert result.outcome == INCOMPATIBLE

    def test_text_appearing_where_none_was(self):
        prev = parse_markup("<h4></h4><p>x</p>")
        nxt = parse_markup("<h4>T</h4><p>x</p>")

        assert reconcile(prev, nxt).outcome == INCOMPATIBLE

    def test_incompatible_discards_earlier_edits(self):
        prev = parse_markup("<h1>Soup</h1><p>x</p>")
        nxt = parse_markup("<h1>Stew</h1><div>x</div>")

        result = reconcile(prev, nxt)

        assert result.outcome == INCOMPATIBLE
        assert result.edit_count == 0


def nested(depth, leaf_text, attrs=None):
    """A chain of depth <div>s ending in one text leaf."""
    node = text_leaf(leaf_text)
    for level in range(depth):
        node = element("div", {"data-level": str(level), **(attrs or {})}, [node])
    return fragment([node])


class TestDeepTrees:
    # Deeper than the default recursion limit
    DEPTH = 3000

    def test_identical_deep_trees(self):
        assert reconcile(nested(self.DEPTH, "x"), nested(self.DEPTH, "x")).outcome == NO_CHANGE

    def test_leaf_change_at_the_bottom(self):
        result = reconcile(nested(self.DEPTH, "x"), nested(self.DEPTH, "y"))

        assert result.outcome == PATCH
        assert result.text_edits == [TextEdit(index=self.DEPTH + 1, new_text="y")]
        assert result.attribute_edits == []

    def test_one_edit_per_changed_element(self):
        result = reconcile(nested(50, "x"), nested(50, "x", {"class": "on"}))

        assert result.outcome == PATCH
        assert len(result.attribute_edits) == 50
        assert result.text_edits == []
