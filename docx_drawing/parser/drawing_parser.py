"""Decoders for ``w:drawing`` and its ``wp:inline`` / ``wp:anchor`` frames."""
from __future__ import annotations

from typing import Dict, Union

from docx_drawing.model.drawing import (
    Anchor,
    DocPr,
    Drawing,
    EffectExtent,
    Extent,
    GraphicFrameLocks,
    GraphicFrameProperties,
    Inline,
    PositionH,
    PositionV,
    SimplePos,
    WrapNone,
    WrapSquare,
    WrapTopAndBottom,
)
from docx_drawing.parser.decoder import (
    Handler,
    apply_attributes,
    as_int,
    as_str,
    decode_children,
    int_attr,
    parse_int,
    read_int_content,
    read_text,
    store,
)
from docx_drawing.parser.graphic_parser import decode_graphic
from docx_drawing.parser.token_stream import ElementScope, StartElement
from docx_drawing.utils.logger import get_logger

LOGGER = get_logger(__name__)

_DISTANCE_ATTRIBUTES = {
    "distT": ("dist_t", as_int),
    "distB": ("dist_b", as_int),
    "distL": ("dist_l", as_int),
    "distR": ("dist_r", as_int),
}

_ANCHOR_ATTRIBUTES = {
    **_DISTANCE_ATTRIBUTES,
    "simplePos": ("simple_pos", as_int),
    "relativeHeight": ("relative_height", as_int),
    "behindDoc": ("behind_doc", as_int),
    "locked": ("locked", as_int),
    "layoutInCell": ("layout_in_cell", as_int),
    "allowOverlap": ("allow_overlap", as_int),
}

_DOC_PR_ATTRIBUTES = {
    "id": ("id", as_int),
    "name": ("name", as_str),
    "descr": ("descr", as_str),
}


def decode_drawing(scope: ElementScope, start: StartElement) -> Drawing:
    """Decode ``w:drawing``; the last ``inline`` or ``anchor`` child selects the frame."""
    drawing = Drawing()
    decode_children(
        scope,
        {
            "inline": store(drawing, "frame", decode_inline),
            "anchor": store(drawing, "frame", decode_anchor),
        },
    )
    if drawing.frame is None:
        LOGGER.debug("Drawing without an inline or anchor frame")
    return drawing


def decode_inline(scope: ElementScope, start: StartElement) -> Inline:
    inline = Inline()
    apply_attributes(inline, start, _DISTANCE_ATTRIBUTES)
    decode_children(scope, _frame_handlers(inline))
    return inline


def decode_anchor(scope: ElementScope, start: StartElement) -> Anchor:
    anchor = Anchor()
    apply_attributes(anchor, start, _ANCHOR_ATTRIBUTES)

    def simple_pos(child: ElementScope, child_start: StartElement) -> None:
        anchor.simple_pos_xy = decode_simple_pos(child, child_start)

    def wrap_none(child: ElementScope, child_start: StartElement) -> None:
        anchor.wrap = WrapNone()

    def wrap_square(child: ElementScope, child_start: StartElement) -> None:
        anchor.wrap = WrapSquare(wrap_text=child_start.get("wrapText", ""))

    def wrap_top_and_bottom(child: ElementScope, child_start: StartElement) -> None:
        anchor.wrap = WrapTopAndBottom()

    handlers = _frame_handlers(anchor)
    handlers.update(
        {
            "simplePos": simple_pos,
            "positionH": store(anchor, "position_h", decode_position_h),
            "positionV": store(anchor, "position_v", decode_position_v),
            "wrapNone": wrap_none,
            "wrapSquare": wrap_square,
            "wrapTopAndBottom": wrap_top_and_bottom,
        }
    )
    decode_children(scope, handlers)
    return anchor


def _frame_handlers(frame: Union[Inline, Anchor]) -> Dict[str, Handler]:
    """Children shared by inline and anchored frames."""
    return {
        "extent": store(frame, "extent", decode_extent),
        "effectExtent": store(frame, "effect_extent", decode_effect_extent),
        "docPr": store(frame, "doc_pr", decode_doc_pr),
        "cNvGraphicFramePr": store(frame, "frame_properties", decode_frame_properties),
        "graphic": store(frame, "graphic", decode_graphic),
    }


def decode_extent(scope: ElementScope, start: StartElement) -> Extent:
    return Extent(cx=int_attr(start, "cx"), cy=int_attr(start, "cy"))


def decode_effect_extent(scope: ElementScope, start: StartElement) -> EffectExtent:
    return EffectExtent(
        l=int_attr(start, "l"),
        t=int_attr(start, "t"),
        r=int_attr(start, "r"),
        b=int_attr(start, "b"),
    )


def decode_simple_pos(scope: ElementScope, start: StartElement) -> SimplePos:
    return SimplePos(x=int_attr(start, "x"), y=int_attr(start, "y"))


def decode_doc_pr(scope: ElementScope, start: StartElement) -> DocPr:
    doc_pr = DocPr()
    apply_attributes(doc_pr, start, _DOC_PR_ATTRIBUTES)
    return doc_pr


def decode_frame_properties(scope: ElementScope, start: StartElement) -> GraphicFrameProperties:
    props = GraphicFrameProperties()

    def graphic_frame_locks(child: ElementScope, child_start: StartElement) -> None:
        locks = decode_frame_locks(child, child_start)
        value = child_start.get("noChangeAspect")
        if value is not None:
            locks.no_change_aspect = parse_int(child_start, "noChangeAspect", value)
        props.locks = locks

    decode_children(scope, {"graphicFrameLocks": graphic_frame_locks})
    return props


def decode_frame_locks(scope: ElementScope, start: StartElement) -> GraphicFrameLocks:
    """Structural decode of ``a:graphicFrameLocks``; the caller hoists ``noChangeAspect``."""
    decode_children(scope, {})
    return GraphicFrameLocks()


def decode_position_h(scope: ElementScope, start: StartElement) -> PositionH:
    position = PositionH(relative_from=start.get("relativeFrom", ""))
    decode_children(scope, _position_handlers(position))
    return position


def decode_position_v(scope: ElementScope, start: StartElement) -> PositionV:
    position = PositionV(relative_from=start.get("relativeFrom", ""))
    decode_children(scope, _position_handlers(position))
    return position


def _position_handlers(position: Union[PositionH, PositionV]) -> Dict[str, Handler]:
    def pos_offset(child: ElementScope, child_start: StartElement) -> None:
        position.pos_offset = read_int_content(child, child_start)

    def align(child: ElementScope, child_start: StartElement) -> None:
        position.align = read_text(child).strip()

    return {"posOffset": pos_offset, "align": align}
