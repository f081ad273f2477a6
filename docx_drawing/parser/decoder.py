"""Shared decode loop and attribute helpers used by every element decoder.

A decoder is any callable ``decoder(scope, start) -> record``. ``scope`` is
positioned just after ``start`` and ends at its matching end tag.
"""
from __future__ import annotations

import re
from typing import Callable, Dict, List, Mapping, Set, Tuple, TypeVar, Union

from docx_drawing.model.graphic import RawXML
from docx_drawing.parser.errors import (
    DrawingDecodeError,
    MalformedAttributeError,
    MalformedContentError,
)
from docx_drawing.parser.token_stream import (
    XML_NAMESPACE,
    Attr,
    CharData,
    ElementScope,
    EndElement,
    StartElement,
    TokenStream,
)
from docx_drawing.utils.logger import get_logger

LOGGER = get_logger(__name__)

T = TypeVar("T")

Decoder = Callable[[ElementScope, StartElement], T]
Handler = Callable[[ElementScope, StartElement], None]
Converter = Callable[[StartElement, Attr], object]

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)


def decode_children(scope: ElementScope, handlers: Mapping[str, Handler]) -> None:
    """Dispatch every direct child element of ``scope`` by local name.

    Unknown children are skipped with their whole sub-tree. Whatever a handler
    leaves unread of its child is drained, so the cursor always ends up past
    the child's end tag.
    """
    while True:
        token = scope.next_token()
        if token is None:
            return
        if not isinstance(token, StartElement):
            continue
        child = scope.scope(token)
        handler = handlers.get(token.name.local)
        if handler is None:
            LOGGER.debug("Skipping unsupported element <%s> in <%s>", token.name.qualified, scope.start.name.qualified)
        else:
            handler(child, token)
        child.drain()


def store(record: object, field_name: str, decoder: Decoder) -> Handler:
    """Build a handler that decodes a child and assigns the result to ``record.field_name``."""

    def handler(scope: ElementScope, start: StartElement) -> None:
        setattr(record, field_name, decoder(scope, start))

    return handler


def apply_attributes(record: object, start: StartElement, fields: Mapping[str, Tuple[str, Converter]]) -> None:
    """Copy recognized attributes of ``start`` onto ``record`` in source order."""
    for attr in start.attrs:
        entry = fields.get(attr.name.local)
        if entry is None:
            continue
        field_name, convert = entry
        setattr(record, field_name, convert(start, attr))


def as_int(start: StartElement, attr: Attr) -> int:
    return parse_int(start, attr.name.local, attr.value)


def as_str(start: StartElement, attr: Attr) -> str:
    return attr.value


def parse_int(start: StartElement, attribute: str, value: str) -> int:
    """Parse a base-10 integer attribute, naming the element when it is malformed."""
    if not _INTEGER.fullmatch(value):
        raise MalformedAttributeError(start.name.qualified, attribute, value)
    return int(value)


def int_attr(start: StartElement, attribute: str, default: int = 0) -> int:
    value = start.get(attribute)
    if value is None:
        return default
    return parse_int(start, attribute, value)


def read_text(scope: ElementScope) -> str:
    """Concatenate the character data left in ``scope``."""
    return "".join(token.text for token in scope if isinstance(token, CharData))


def read_int_content(scope: ElementScope, start: StartElement) -> int:
    text = read_text(scope).strip()
    if not _INTEGER.fullmatch(text):
        raise MalformedContentError(start.name.qualified, text)
    return int(text)


def capture_raw_xml(scope: ElementScope) -> RawXML:
    """Re-serialize every token up to the end of ``scope`` into an opaque blob.

    Prefixes used in the blob but bound outside it are recorded on the blob
    with the URIs they resolved to, so it can be re-emitted under any parent.
    """
    parts: List[str] = []
    outer: Dict[str, str] = {}
    declared: List[Set[str]] = []
    for token in scope:
        if isinstance(token, StartElement):
            declared.append({prefix for prefix, _ in token.namespaces})
            names = [token.name] + [attr.name for attr in token.attrs if attr.name.prefix]
            for name in names:
                if not name.space or name.space == XML_NAMESPACE:
                    continue
                if any(name.prefix in level for level in declared):
                    continue
                outer.setdefault(name.prefix, name.space)
        elif isinstance(token, EndElement):
            declared.pop()
        parts.append(token.to_xml())
    return RawXML("".join(parts).encode("utf-8"), tuple(outer.items()))


def parse_fragment(source: Union[bytes, str, TokenStream], decoder: Decoder[T]) -> T:
    """Decode the first element of an XML fragment with ``decoder``."""
    stream = source if isinstance(source, TokenStream) else TokenStream(source)
    for token in stream:
        if isinstance(token, StartElement):
            scope = stream.scope(token)
            record = decoder(scope, token)
            scope.drain()
            return record
    raise DrawingDecodeError("XML fragment contains no element")
