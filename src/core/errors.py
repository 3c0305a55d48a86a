"""Error types raised by the selector builder and the JSON helpers."""

DUPLICATE_FRAGMENT_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector."
)
SELECTOR_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element."
)
COMPOUND_FRAGMENT_MESSAGE = "Fragments cannot be added to a combined selector."


class SelectorError(ValueError):
    """Base class for selector construction failures."""


class DuplicateFragmentError(SelectorError):
    """Raised when element, id or pseudo-element is added twice."""

    def __init__(self, message: str = DUPLICATE_FRAGMENT_MESSAGE) -> None:
        super().__init__(message)


class SelectorOrderError(SelectorError):
    """Raised when a fragment is added after a fragment that must follow it."""

    def __init__(self, message: str = SELECTOR_ORDER_MESSAGE) -> None:
        super().__init__(message)


class ParseError(ValueError):
    """Raised when text cannot be decoded as JSON."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message)
