"""Exceptions raised while decoding drawing and hyperlink fragments."""
from __future__ import annotations


class DrawingDecodeError(ValueError):
    """Base class for every decode failure; any of them aborts the whole fragment."""


class StreamReadError(DrawingDecodeError):
    """The underlying XML tokenizer failed (malformed or truncated input)."""


class MalformedAttributeError(DrawingDecodeError):
    """A numeric attribute does not hold a base-10 integer."""

    def __init__(self, element: str, attribute: str, value: str) -> None:
        super().__init__(f"<{element}> attribute {attribute}={value!r} is not an integer")
        self.element = element
        self.attribute = attribute
        self.value = value


class MalformedContentError(DrawingDecodeError):
    """Numeric element text (such as ``wp:posOffset``) does not hold an integer."""

    def __init__(self, element: str, value: str) -> None:
        super().__init__(f"<{element}> content {value!r} is not an integer")
        self.element = element
        self.value = value
