"""Records for the DrawingML graphic payload chain (``a:graphic`` down to ``a:prstGeom``)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class RawXML:
    """Opaque XML passthrough.

    ``data`` is the exact re-serialization of the tokens found inside the
    source element (its inner XML, UTF-8 encoded). It is never parsed back
    into records; writers re-emit it verbatim inside the owning element.

    ``namespaces`` holds the ``(prefix, uri)`` bindings that names inside
    ``data`` rely on but that were declared outside it. An empty prefix is
    the default namespace.
    """

    data: bytes = b""
    namespaces: Tuple[Tuple[str, str], ...] = ()

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.data.decode("utf-8")

    def __bool__(self) -> bool:
        return bool(self.data)


@dataclass(slots=True)
class Offset:
    """``a:off``."""

    x: int = 0
    y: int = 0


@dataclass(slots=True)
class PositiveSize:
    """``a:ext``."""

    cx: int = 0
    cy: int = 0


@dataclass(slots=True)
class Transform2D:
    """``a:xfrm``: offset, size, rotation (60000ths of a degree) and flips."""

    rot: Optional[int] = None
    flip_h: Optional[int] = None
    flip_v: Optional[int] = None
    off: Optional[Offset] = None
    ext: Optional[PositiveSize] = None


@dataclass(slots=True)
class PresetGeometry:
    """``a:prstGeom``: a named shape with its adjustment list kept as raw XML."""

    prst: str = ""
    av_lst: Optional[RawXML] = None


@dataclass(slots=True)
class ShapeProperties:
    """``pic:spPr``."""

    xfrm: Optional[Transform2D] = None
    prst_geom: Optional[PresetGeometry] = None


@dataclass(slots=True)
class AlphaModFix:
    """``a:alphaModFix``: opacity in thousandths of a percent."""

    amount: int = 100000


@dataclass(slots=True)
class Blip:
    """``a:blip``: reference to the image part via ``r:embed``."""

    embed: str = ""
    cstate: str = ""
    alpha_mod_fix: Optional[AlphaModFix] = None


@dataclass(slots=True)
class Stretch:
    """``a:stretch``."""

    fill_rect: bool = False


@dataclass(slots=True)
class BlipFill:
    """``pic:blipFill``."""

    blip: Optional[Blip] = None
    stretch: Optional[Stretch] = None


@dataclass(slots=True)
class NonVisualDrawingProperties:
    """``pic:cNvPr``."""

    id: str = ""
    name: str = ""


@dataclass(slots=True)
class NonVisualPicProperties:
    """``pic:nvPicPr``."""

    c_nv_pr: Optional[NonVisualDrawingProperties] = None


@dataclass(slots=True)
class Picture:
    """``pic:pic``."""

    xmlns_pic: Optional[str] = None
    nv_pic_pr: Optional[NonVisualPicProperties] = None
    blip_fill: Optional[BlipFill] = None
    sp_pr: Optional[ShapeProperties] = None


@dataclass(slots=True)
class GraphicData:
    """``a:graphicData``: payload tagged by ``uri``."""

    uri: str = ""
    pic: Optional[Picture] = None


@dataclass(slots=True)
class Graphic:
    """``a:graphic``."""

    xmlns_a: Optional[str] = None
    data: Optional[GraphicData] = None
