"""Tests for the Selector value: fragments, ordering rules, rendering."""

import pytest
from pydantic import ValidationError

from src.core.errors import (
    DUPLICATE_FRAGMENT_MESSAGE,
    SELECTOR_ORDER_MESSAGE,
    DuplicateFragmentError,
    SelectorError,
    SelectorOrderError,
)
from src.css.selector import FragmentKind, Selector


class TestRendering:
    def test_empty_selector(self) -> None:
        assert Selector().stringify() == ""

    def test_element_only(self) -> None:
        assert Selector().element("div").stringify() == "div"

    def test_ids_prefixed(self) -> None:
        assert Selector().id("main").stringify() == "#main"

    def test_classes_accumulate_in_order(self) -> None:
        s = Selector().class_("a").class_("b").class_("c")
        assert s.stringify() == ".a.b.c"

    def test_attrs_concatenated_verbatim(self) -> None:
        s = Selector().attr('[href$=".png"]').attr("[target]")
        assert s.stringify() == '[href$=".png"][target]'

    def test_bare_attr_gets_brackets(self) -> None:
        assert Selector().attr('href$=".png"').stringify() == '[href$=".png"]'

    def test_empty_attr_not_wrapped(self) -> None:
        s = Selector().attr("")
        assert s.attrs == ("",)
        assert s.stringify() == ""

    def test_pseudo_classes_joined(self) -> None:
        s = Selector().pseudo_class("hover").pseudo_class("focus")
        assert s.stringify() == ":hover:focus"

    def test_pseudo_element_prefixed(self) -> None:
        assert Selector().pseudo_element("after").stringify() == "::after"

    def test_full_canonical_selector(self) -> None:
        s = (
            Selector()
            .element("a")
            .id("logo")
            .class_("nav")
            .class_("active")
            .attr("[rel=home]")
            .pseudo_class("hover")
            .pseudo_element("before")
        )
        assert s.stringify() == "a#logo.nav.active[rel=home]:hover::before"

    def test_str_matches_stringify(self) -> None:
        s = Selector().element("li").class_("item")
        assert str(s) == "li.item"

    def test_stringify_idempotent(self) -> None:
        s = Selector().element("p").pseudo_class("first-child")
        assert s.stringify() == s.stringify()

    def test_values_stored_verbatim(self) -> None:
        s = Selector().class_("has space").pseudo_class("not(.x)")
        assert s.stringify() == ".has space:not(.x)"


class TestImmutability:
    def test_derived_selector_leaves_base_untouched(self) -> None:
        s1 = Selector().class_("a")
        s2 = s1.class_("b")
        assert s1.stringify() == ".a"
        assert s2.stringify() == ".a.b"

    def test_branching_from_shared_prefix(self) -> None:
        base = Selector().element("li")
        first = base.pseudo_class("first-child")
        last = base.pseudo_class("last-child")
        assert first.stringify() == "li:first-child"
        assert last.stringify() == "li:last-child"
        assert base.stringify() == "li"

    def test_frozen_model(self) -> None:
        s = Selector().element("div")
        with pytest.raises(ValidationError):
            s.elements = ("span",)  # type: ignore[misc]

    def test_equal_fragments_equal_values(self) -> None:
        assert Selector().element("a").class_("x") == Selector().element("a").class_("x")


class TestDuplicateFragments:
    def test_element_twice(self) -> None:
        with pytest.raises(DuplicateFragmentError):
            Selector().element("div").element("span")

    def test_id_twice(self) -> None:
        with pytest.raises(DuplicateFragmentError):
            Selector().id("a").id("b")

    def test_pseudo_element_twice(self) -> None:
        with pytest.raises(DuplicateFragmentError):
            Selector().pseudo_element("before").pseudo_element("after")

    def test_message(self) -> None:
        with pytest.raises(DuplicateFragmentError) as exc_info:
            Selector().element("div").element("span")
        assert str(exc_info.value) == DUPLICATE_FRAGMENT_MESSAGE

    def test_repeatable_kinds_allowed(self) -> None:
        s = (
            Selector()
            .class_("a").class_("b")
            .attr("[x]").attr("[y]")
            .pseudo_class("hover").pseudo_class("focus")
        )
        assert s.stringify() == ".a.b[x][y]:hover:focus"

    def test_duplicate_reported_before_order(self) -> None:
        # element twice, with a later kind in between
        with pytest.raises(DuplicateFragmentError):
            Selector().element("a").class_("x").element("b")

    def test_failed_call_leaves_receiver_usable(self) -> None:
        s = Selector().element("div")
        with pytest.raises(DuplicateFragmentError):
            s.element("span")
        assert s.stringify() == "div"
        assert s.class_("ok").stringify() == "div.ok"

    def test_failed_order_call_leaves_receiver_usable(self) -> None:
        s = Selector().pseudo_element("after")
        with pytest.raises(SelectorOrderError):
            s.class_("x")
        assert s.stringify() == "::after"
        assert s.classes == ()
        assert s.last_kind is FragmentKind.PSEUDO_ELEMENT


class TestOrdering:
    def test_id_after_class(self) -> None:
        with pytest.raises(SelectorOrderError):
            Selector().class_("a").id("x")

    def test_element_after_id(self) -> None:
        with pytest.raises(SelectorOrderError):
            Selector().id("main").element("div")

    def test_class_after_attr(self) -> None:
        with pytest.raises(SelectorOrderError):
            Selector().attr("[x]").class_("a")

    def test_pseudo_class_after_pseudo_element(self) -> None:
        with pytest.raises(SelectorOrderError):
            Selector().pseudo_element("after").pseudo_class("hover")

    def test_message(self) -> None:
        with pytest.raises(SelectorOrderError, match="element, id, class, attribute"):
            Selector().class_("a").id("x")
        assert SELECTOR_ORDER_MESSAGE.startswith("Selector parts should be arranged")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            Selector().class_("a").element("div")

    def test_last_kind(self) -> None:
        assert Selector().last_kind is None
        assert Selector().element("a").last_kind is FragmentKind.ELEMENT
        assert Selector().id("x").attr("[y]").last_kind is FragmentKind.ATTRIBUTE


class TestCompound:
    def test_segments_of_simple_selector(self) -> None:
        assert Selector().element("div").id("x").segments() == ("div#x",)

    def test_compound_renders_parts(self) -> None:
        s = Selector(parts=("div", ">", "p"))
        assert s.is_compound
        assert s.stringify() == "div > p"
        assert s.segments() == ("div", ">", "p")

    def test_fragment_on_compound_rejected(self) -> None:
        s = Selector(parts=("div", "+", "p"))
        with pytest.raises(SelectorError, match="combined selector"):
            s.class_("x")

    def test_simple_selector_not_compound(self) -> None:
        assert not Selector().element("div").is_compound
