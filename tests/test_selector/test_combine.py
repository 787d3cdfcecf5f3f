"""Tests for selector combination and the facade entry points."""

import pytest

from cssbuilder.errors import DuplicateFragmentError, OrderViolationError
from cssbuilder.selector import Combinator, CombinedSelector, SelectorBuilder
from cssbuilder.selector import css_selector_builder as builder
from cssbuilder.selector import facade


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------


class TestFacade:
    def test_each_call_returns_new_builder(self):
        first = builder.element("a")
        second = builder.element("a")
        assert isinstance(first, SelectorBuilder)
        assert first is not second

    def test_calls_are_independent(self):
        builder.element("a")
        # A second element on a fresh builder must not count as a duplicate.
        assert builder.element("b").render() == "b"

    @pytest.mark.parametrize(
        "entry,value,expected",
        [
            ("element", "div", "div"),
            ("id", "main", "#main"),
            ("class_", "note", ".note"),
            ("attr", "title", "[title]"),
            ("pseudo_class", "hover", ":hover"),
            ("pseudo_element", "before", "::before"),
        ],
    )
    def test_entry_points_seed_one_fragment(self, entry, value, expected):
        assert getattr(builder, entry)(value).render() == expected

    def test_module_functions_match_namespace(self):
        assert facade.id("main").class_("container").class_("editable").render() == "#main.container.editable"

    def test_facade_builder_enforces_rules(self):
        with pytest.raises(DuplicateFragmentError):
            builder.element("a").element("b")
        with pytest.raises(OrderViolationError):
            builder.class_("y").id("x")


# ---------------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------------


class TestCombine:
    def test_adjacent_sibling(self):
        result = builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        ).render()
        assert result == "div#main + table#data"

    def test_descendant_gets_three_spaces(self):
        result = builder.combine(builder.element("tr"), " ", builder.element("td")).render()
        assert result == "tr   td"

    def test_combinator_enum_members(self):
        left, right = builder.element("ul"), builder.element("li")
        assert builder.combine(left, Combinator.CHILD, right).render() == "ul > li"
        assert builder.combine(left, Combinator.SUBSEQUENT_SIBLING, right).render() == "ul ~ li"
        assert builder.combine(left, Combinator.DESCENDANT, right).render() == "ul   li"

    def test_returns_combined_selector(self):
        combined = builder.combine(builder.element("a"), ">", builder.element("b"))
        assert isinstance(combined, CombinedSelector)
        assert combined.left == "a"
        assert combined.separator == ">"
        assert combined.right == "b"

    def test_method_form_uses_self_as_left(self):
        combined = builder.element("h1").combine(builder.element("p"), "+")
        assert combined.render() == "h1 + p"

    def test_nested_combination(self):
        a = builder.element("div").id("main").class_("container").class_("draggable")
        b = builder.element("table").id("data")
        c = builder.element("tr").pseudo_class("nth-of-type(even)")
        d = builder.element("td").pseudo_class("nth-of-type(even)")
        result = builder.combine(a, "+", builder.combine(b, "~", builder.combine(c, " ", d))).render()
        assert result == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combined_selector_can_be_combined_again(self):
        inner = builder.combine(builder.element("a"), ">", builder.element("b"))
        outer = inner.combine(builder.class_("c"), "~")
        assert outer.render() == "a > b ~ .c"

    def test_operands_captured_at_combine_time(self):
        left = builder.element("div")
        combined = builder.combine(left, ">", builder.element("p"))
        left.class_("late")
        assert combined.render() == "div > p"

    def test_render_is_idempotent(self):
        combined = builder.combine(builder.element("a").class_("x"), "+", builder.element("b"))
        assert combined.render() == combined.render() == "a.x + b"

    def test_combined_selector_is_frozen(self):
        combined = builder.combine(builder.element("a"), "+", builder.element("b"))
        with pytest.raises(AttributeError):
            combined.left = "x"  # type: ignore[misc]

    def test_str_matches_render(self):
        combined = builder.combine(builder.element("a"), "+", builder.element("b"))
        assert str(combined) == "a + b"
