"""Immutable CSS selector values.

A Selector is either simple (six fragment tuples) or compound (rendered
selectors interleaved with combinators). Every fragment call returns a new
Selector, so a shared prefix can be branched freely:

    base = Selector().element("li")
    first = base.pseudo_class("first-child")
    last = base.pseudo_class("last-child")

Canonical order: element, id, class, attribute, pseudo-class, pseudo-element.
"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict

from src.core.errors import (
    COMPOUND_FRAGMENT_MESSAGE,
    DuplicateFragmentError,
    SelectorError,
    SelectorOrderError,
)


class FragmentKind(IntEnum):
    """Fragment kinds, valued by their position in the canonical order."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


# kind → (field name, prefix/separator used when rendering)
_LAYOUT: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("elements", ""),
    FragmentKind.ID: ("ids", "#"),
    FragmentKind.CLASS: ("classes", "."),
    FragmentKind.ATTRIBUTE: ("attrs", ""),
    FragmentKind.PSEUDO_CLASS: ("pseudo_classes", ":"),
    FragmentKind.PSEUDO_ELEMENT: ("pseudo_elements", "::"),
}

# Kinds allowed at most once per selector.
_UNIQUE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


class Selector(BaseModel):
    """A CSS selector built from fragments or combined from two selectors.

    Frozen. Use the fragment methods to derive new values.
    """

    model_config = ConfigDict(frozen=True)

    elements: tuple[str, ...] = ()
    ids: tuple[str, ...] = ()
    classes: tuple[str, ...] = ()
    attrs: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_elements: tuple[str, ...] = ()
    parts: tuple[str, ...] | None = None

    @property
    def is_compound(self) -> bool:
        return self.parts is not None

    @property
    def last_kind(self) -> FragmentKind | None:
        """The latest kind (in canonical order) already present, or None."""
        for kind in sorted(FragmentKind, reverse=True):
            if getattr(self, _LAYOUT[kind][0]):
                return kind
        return None

    def element(self, value: str) -> "Selector":
        return self._add(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> "Selector":
        return self._add(FragmentKind.ID, value)

    def class_(self, value: str) -> "Selector":
        return self._add(FragmentKind.CLASS, value)

    def attr(self, value: str) -> "Selector":
        """Add an attribute clause; a bare clause like ``href$=".png"`` gets brackets."""
        if value and not value.startswith("["):
            value = f"[{value}]"
        return self._add(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "Selector":
        return self._add(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "Selector":
        return self._add(FragmentKind.PSEUDO_ELEMENT, value)

    def segments(self) -> tuple[str, ...]:
        """Rendered pieces used when this selector joins a combination."""
        if self.parts is not None:
            return self.parts
        return (self.stringify(),)

    def stringify(self) -> str:
        """Render the selector as CSS text."""
        if self.parts is not None:
            return " ".join(self.parts)

        rendered = ""
        for kind in FragmentKind:
            field, prefix = _LAYOUT[kind]
            values: tuple[str, ...] = getattr(self, field)
            if values:
                rendered += prefix + prefix.join(values)
        return rendered

    def __str__(self) -> str:
        return self.stringify()

    def _add(self, kind: FragmentKind, value: str) -> "Selector":
        if self.parts is not None:
            raise SelectorError(COMPOUND_FRAGMENT_MESSAGE)

        field = _LAYOUT[kind][0]
        current: tuple[str, ...] = getattr(self, field)
        if kind in _UNIQUE_KINDS and current:
            raise DuplicateFragmentError

        last = self.last_kind
        if last is not None and last > kind:
            raise SelectorOrderError

        return self.model_copy(update={field: (*current, value)})
