"""Records for hyperlinks and the runs they wrap."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from docx_drawing.model.drawing import Drawing
from docx_drawing.model.graphic import RawXML


@dataclass(slots=True)
class Run:
    """Minimal ``w:r`` record: text, raw run properties and an optional drawing."""

    text: str = ""
    properties: Optional[RawXML] = None
    drawing: Optional[Drawing] = None


@dataclass(slots=True)
class Hyperlink:
    """``w:hyperlink``: relationship id (``r:id``) plus the single run it contains."""

    id: str = ""
    anchor: Optional[str] = None
    run: Run = field(default_factory=Run)
