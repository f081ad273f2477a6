"""Helper functions to work with XML namespaces."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple
from xml.etree import ElementTree as ET
from xml.sax.saxutils import quoteattr


@dataclass(frozen=True)
class Namespaces:
    """Common OpenXML namespace prefixes used across decoders and the writer."""

    WORD: Dict[str, str] = None  # type: ignore[assignment]
    DRAWING: Dict[str, str] = None  # type: ignore[assignment]
    ALL: Dict[str, str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:  # pragma: no cover
        raise RuntimeError("Namespaces should not be instantiated")


XMLNS_WORDPROCESSINGML = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
XMLNS_RELATIONSHIPS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
XMLNS_WORDPROCESSING_DRAWING = "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"
XMLNS_DRAWINGML_MAIN = "http://schemas.openxmlformats.org/drawingml/2006/main"
XMLNS_DRAWINGML_PICTURE = "http://schemas.openxmlformats.org/drawingml/2006/picture"

Namespaces.WORD = {  # type: ignore[attr-defined]
    "w": XMLNS_WORDPROCESSINGML,
    "r": XMLNS_RELATIONSHIPS,
}
Namespaces.DRAWING = {  # type: ignore[attr-defined]
    "wp": XMLNS_WORDPROCESSING_DRAWING,
    "a": XMLNS_DRAWINGML_MAIN,
    "pic": XMLNS_DRAWINGML_PICTURE,
}
Namespaces.ALL = {**Namespaces.WORD, **Namespaces.DRAWING}  # type: ignore[attr-defined]


def register_prefixes() -> None:
    """Make ElementTree serialize the OpenXML namespaces with their usual prefixes."""
    for prefix, uri in Namespaces.ALL.items():
        ET.register_namespace(prefix, uri)


def qualify(name: str) -> str:
    """Turn ``prefix:local`` into ElementTree's ``{uri}local`` notation."""
    if ":" not in name:
        return name
    prefix, local = name.split(":", 1)
    return f"{{{Namespaces.ALL[prefix]}}}{local}"


def namespace_declarations(extra: Iterable[Tuple[str, str]] = ()) -> str:
    """Return ``xmlns`` declarations for every known prefix plus ``extra`` bindings.

    ``extra`` entries override known prefixes; an empty prefix declares the
    default namespace.
    """
    bindings = {**Namespaces.ALL, **dict(extra)}
    return " ".join(
        f"xmlns:{prefix}={quoteattr(uri)}" if prefix else f"xmlns={quoteattr(uri)}"
        for prefix, uri in bindings.items()
    )
