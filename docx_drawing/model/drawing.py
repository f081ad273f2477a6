"""Records for ``w:drawing`` and its inline/anchored graphic frames.

Dimensions are English Metric Units (1 EMU = 1/914400 inch). Optional fields
are ``None`` exactly when the matching child element was absent in the source.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from docx_drawing.model.graphic import Graphic


@dataclass(slots=True)
class Extent:
    """``wp:extent``: size of the drawing frame."""

    cx: int = 0
    cy: int = 0


@dataclass(slots=True)
class EffectExtent:
    """``wp:effectExtent``: extra space taken by effects around the frame."""

    l: int = 0  # noqa: E741
    t: int = 0
    r: int = 0
    b: int = 0


@dataclass(slots=True)
class DocPr:
    """``wp:docPr``: drawing object properties."""

    id: int = 0
    name: str = ""
    descr: Optional[str] = None


@dataclass(slots=True)
class GraphicFrameLocks:
    """``a:graphicFrameLocks``."""

    no_change_aspect: Optional[int] = None


@dataclass(slots=True)
class GraphicFrameProperties:
    """``wp:cNvGraphicFramePr``."""

    locks: Optional[GraphicFrameLocks] = None


@dataclass(slots=True)
class SimplePos:
    """``wp:simplePos``: absolute position of a floating object."""

    x: int = 0
    y: int = 0


@dataclass(slots=True)
class PositionH:
    """``wp:positionH``: horizontal placement relative to ``relative_from``.

    Exactly one of ``pos_offset`` and ``align`` is normally set, from the
    ``wp:posOffset`` or ``wp:align`` child respectively.
    """

    relative_from: str = ""
    pos_offset: Optional[int] = None
    align: Optional[str] = None


@dataclass(slots=True)
class PositionV:
    """``wp:positionV``: vertical placement relative to ``relative_from``."""

    relative_from: str = ""
    pos_offset: Optional[int] = None
    align: Optional[str] = None


@dataclass(slots=True)
class RelativePlacement:
    """Anchor placement given by a horizontal/vertical position pair."""

    horizontal: PositionH
    vertical: PositionV


AnchorPlacement = Union[SimplePos, RelativePlacement]


@dataclass(frozen=True, slots=True)
class WrapNone:
    """``wp:wrapNone`` marker: text does not wrap around the object."""


@dataclass(frozen=True, slots=True)
class WrapTopAndBottom:
    """``wp:wrapTopAndBottom`` marker."""


@dataclass(slots=True)
class WrapSquare:
    """``wp:wrapSquare``: wrap along the bounding box on ``wrap_text`` sides."""

    wrap_text: str = ""


WrapMode = Union[WrapNone, WrapSquare, WrapTopAndBottom]


@dataclass(slots=True)
class Inline:
    """``wp:inline``: a graphic frame in the normal text flow."""

    dist_t: int = 0
    dist_b: int = 0
    dist_l: int = 0
    dist_r: int = 0
    extent: Optional[Extent] = None
    effect_extent: Optional[EffectExtent] = None
    doc_pr: Optional[DocPr] = None
    frame_properties: Optional[GraphicFrameProperties] = None
    graphic: Optional[Graphic] = None


@dataclass(slots=True)
class Anchor:
    """``wp:anchor``: a floating graphic frame with explicit placement and wrapping.

    Word writes ``wp:simplePos`` and both position elements on every anchor,
    so all three are stored as read and written back unchanged. The
    ``simple_pos`` flag decides which of them applies: ``placement`` returns
    either a ``SimplePos`` or a ``RelativePlacement``, never both.
    """

    dist_t: int = 0
    dist_b: int = 0
    dist_l: int = 0
    dist_r: int = 0
    simple_pos: int = 0
    relative_height: int = 0
    behind_doc: int = 0
    locked: int = 0
    layout_in_cell: int = 0
    allow_overlap: int = 0

    simple_pos_xy: Optional[SimplePos] = None
    position_h: Optional[PositionH] = None
    position_v: Optional[PositionV] = None
    extent: Optional[Extent] = None
    effect_extent: Optional[EffectExtent] = None
    wrap: Optional[WrapMode] = None
    doc_pr: Optional[DocPr] = None
    frame_properties: Optional[GraphicFrameProperties] = None
    graphic: Optional[Graphic] = None

    @property
    def placement(self) -> Optional[AnchorPlacement]:
        """The placement in effect: ``simplePos="1"`` selects the absolute position."""
        if self.simple_pos and self.simple_pos_xy is not None:
            return self.simple_pos_xy
        if self.position_h is not None and self.position_v is not None:
            return RelativePlacement(horizontal=self.position_h, vertical=self.position_v)
        return None

    @property
    def wrap_none(self) -> Optional[WrapNone]:
        return self.wrap if isinstance(self.wrap, WrapNone) else None

    @property
    def wrap_square(self) -> Optional[WrapSquare]:
        return self.wrap if isinstance(self.wrap, WrapSquare) else None

    @property
    def wrap_top_and_bottom(self) -> Optional[WrapTopAndBottom]:
        return self.wrap if isinstance(self.wrap, WrapTopAndBottom) else None


GraphicFrame = Union[Inline, Anchor]


@dataclass(slots=True)
class Drawing:
    """``w:drawing``: holds at most one of an inline or an anchored frame."""

    frame: Optional[GraphicFrame] = None

    @property
    def kind(self) -> Optional[str]:
        if isinstance(self.frame, Inline):
            return "inline"
        if isinstance(self.frame, Anchor):
            return "anchor"
        return None

    @property
    def inline(self) -> Optional[Inline]:
        return self.frame if isinstance(self.frame, Inline) else None

    @property
    def anchor(self) -> Optional[Anchor]:
        return self.frame if isinstance(self.frame, Anchor) else None
