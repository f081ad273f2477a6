"""Forward-only pull tokenizer over XML, built on ElementTree's parser-target hook.

``TokenStream`` feeds the source to :class:`xml.etree.ElementTree.XMLParser`
in chunks and hands out the buffered tokens one at a time. ``ElementScope``
narrows a stream to the inside of one element, so decoders can read until
``None`` without knowing where their element ends.
"""
from __future__ import annotations

import io
from collections import deque
from dataclasses import dataclass
from typing import BinaryIO, Deque, Dict, Iterator, List, Optional, TextIO, Tuple, Union
from xml.etree import ElementTree as ET
from xml.sax.saxutils import escape

from docx_drawing.parser.errors import StreamReadError

DEFAULT_CHUNK_SIZE = 64 * 1024
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

_ATTR_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}


@dataclass(frozen=True)
class QName:
    """Namespace URI, local name, and the prefix the source used for it."""

    space: str
    local: str
    prefix: str = ""

    @property
    def qualified(self) -> str:
        return f"{self.prefix}:{self.local}" if self.prefix else self.local


@dataclass(frozen=True)
class Attr:
    name: QName
    value: str


@dataclass(frozen=True)
class StartElement:
    """Start tag with its attributes (source order) and the namespaces it declares."""

    name: QName
    attrs: Tuple[Attr, ...] = ()
    namespaces: Tuple[Tuple[str, str], ...] = ()

    def get(self, local: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of the first attribute with the given local name."""
        for attr in self.attrs:
            if attr.name.local == local:
                return attr.value
        return default

    def namespace_uri(self, prefix: str) -> Optional[str]:
        """Return the URI this tag binds to ``prefix`` via ``xmlns:prefix``."""
        for declared, uri in self.namespaces:
            if declared == prefix:
                return uri
        return None

    def to_xml(self) -> str:
        parts = [f"<{self.name.qualified}"]
        for prefix, uri in self.namespaces:
            declared = f"xmlns:{prefix}" if prefix else "xmlns"
            parts.append(f' {declared}="{escape(uri, _ATTR_ENTITIES)}"')
        for attr in self.attrs:
            parts.append(f' {attr.name.qualified}="{escape(attr.value, _ATTR_ENTITIES)}"')
        parts.append(">")
        return "".join(parts)


@dataclass(frozen=True)
class EndElement:
    name: QName

    def to_xml(self) -> str:
        return f"</{self.name.qualified}>"


@dataclass(frozen=True)
class CharData:
    text: str

    def to_xml(self) -> str:
        return escape(self.text)


@dataclass(frozen=True)
class Comment:
    text: str

    def to_xml(self) -> str:
        return f"<!--{self.text}-->"


@dataclass(frozen=True)
class ProcessingInstruction:
    target: str
    data: str = ""

    def to_xml(self) -> str:
        if self.data:
            return f"<?{self.target} {self.data}?>"
        return f"<?{self.target}?>"


Token = Union[StartElement, EndElement, CharData, Comment, ProcessingInstruction]


class _TokenCollector:
    """ElementTree parser target that turns callbacks into buffered tokens."""

    def __init__(self) -> None:
        self.tokens: Deque[Token] = deque()
        self._pending_ns: List[Tuple[str, str]] = []
        self._scopes: List[List[Tuple[str, str]]] = []

    def start_ns(self, prefix: Optional[str], uri: str) -> None:
        self._pending_ns.append((prefix or "", uri))

    def end_ns(self, prefix: Optional[str]) -> None:
        pass

    def start(self, tag: str, attrib: Dict[str, str]) -> None:
        declared = tuple(self._pending_ns)
        self._pending_ns = []
        self._scopes.append(list(declared))
        name = self._qname(tag, attribute=False)
        attrs = tuple(Attr(self._qname(key, attribute=True), value) for key, value in attrib.items())
        self.tokens.append(StartElement(name, attrs, declared))

    def end(self, tag: str) -> None:
        name = self._qname(tag, attribute=False)
        self._scopes.pop()
        self.tokens.append(EndElement(name))

    def data(self, text: str) -> None:
        if self.tokens and isinstance(self.tokens[-1], CharData):
            text = self.tokens.pop().text + text
        self.tokens.append(CharData(text))

    def comment(self, text: str) -> None:
        self.tokens.append(Comment(text))

    def pi(self, target: str, data: Optional[str] = None) -> None:
        self.tokens.append(ProcessingInstruction(target, data or ""))

    def close(self) -> None:
        return None

    def _qname(self, key: str, attribute: bool) -> QName:
        if not key.startswith("{"):
            return QName("", key)
        uri, local = key[1:].split("}", 1)
        if uri == XML_NAMESPACE:
            return QName(uri, local, "xml")
        return QName(uri, local, self._prefix_for(uri, attribute))

    def _prefix_for(self, uri: str, attribute: bool) -> str:
        # Innermost binding wins, unless that prefix was re-bound further in.
        for depth in range(len(self._scopes) - 1, -1, -1):
            for prefix, bound in self._scopes[depth]:
                if bound != uri or (attribute and not prefix):
                    continue
                if not self._rebound(prefix, depth):
                    return prefix
        return ""

    def _rebound(self, prefix: str, depth: int) -> bool:
        return any(declared == prefix for scope in self._scopes[depth + 1 :] for declared, _ in scope)


class TokenStream:
    """Pull-based token source over XML bytes, text, or a readable file object."""

    def __init__(
        self,
        source: Union[bytes, bytearray, str, BinaryIO, TextIO],
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(bytes(source))
        elif isinstance(source, str):
            source = io.StringIO(source)
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._source = source
        self._chunk_size = chunk_size
        self._collector = _TokenCollector()
        self._parser = ET.XMLParser(target=self._collector)
        self._finished = False

    def next_token(self) -> Optional[Token]:
        """Return the next token, or ``None`` once the input is exhausted."""
        while not self._collector.tokens:
            if self._finished:
                return None
            self._feed()
        return self._collector.tokens.popleft()

    def scope(self, start: StartElement) -> "ElementScope":
        return ElementScope(self, start)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def _feed(self) -> None:
        try:
            chunk = self._source.read(self._chunk_size)
        except OSError as exc:
            self._finished = True
            raise StreamReadError(f"failed to read XML source: {exc}") from exc
        try:
            if chunk:
                self._parser.feed(chunk)
            else:
                self._finished = True
                self._parser.close()
        except ET.ParseError as exc:
            self._finished = True
            raise StreamReadError(f"malformed XML: {exc}") from exc


class ElementScope:
    """View of a stream limited to the content of one element.

    The element's own start tag has already been consumed; ``next_token``
    returns ``None`` after its matching end tag. Scopes nest by reading
    through their parent, which keeps every level's depth count in step.
    """

    def __init__(self, stream: Union[TokenStream, "ElementScope"], start: StartElement) -> None:
        self._stream = stream
        self.start = start
        self._depth = 1

    @property
    def exhausted(self) -> bool:
        return self._depth == 0

    def next_token(self) -> Optional[Token]:
        if self._depth == 0:
            return None
        token = self._stream.next_token()
        if token is None:
            self._depth = 0
            return None
        if isinstance(token, StartElement):
            self._depth += 1
        elif isinstance(token, EndElement):
            self._depth -= 1
            if self._depth == 0:
                return None
        return token

    def scope(self, start: StartElement) -> "ElementScope":
        return ElementScope(self, start)

    def drain(self) -> None:
        """Consume whatever is left of the element, including its end tag."""
        while self.next_token() is not None:
            pass

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token
