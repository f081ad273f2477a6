"""Serialize drawing and hyperlink records back into WordprocessingML.

Children are written in schema order, and an optional child is written only
when its field is set, so a decoded record re-serializes to the same shape.
Raw passthrough blobs are re-inserted as-is inside their owning element.
"""
from __future__ import annotations

import re
from typing import Optional, Union
from xml.etree import ElementTree as ET

from docx_drawing.model.drawing import (
    Anchor,
    DocPr,
    Drawing,
    EffectExtent,
    Extent,
    GraphicFrameProperties,
    Inline,
    PositionH,
    PositionV,
    SimplePos,
    WrapNone,
    WrapSquare,
    WrapTopAndBottom,
)
from docx_drawing.model.graphic import (
    BlipFill,
    Graphic,
    Picture,
    RawXML,
    ShapeProperties,
    Transform2D,
)
from docx_drawing.model.link import Hyperlink, Run
from docx_drawing.utils.xml_utils import namespace_declarations, qualify, register_prefixes

register_prefixes()

Record = Union[Drawing, Inline, Anchor, Graphic, Hyperlink, Run]

_RUN_SPECIALS = re.compile(r"(\t|\n)")


class DrawingEncodeError(ValueError):
    """A record cannot be written as XML (for example, an unparsable raw blob)."""


def _element(tag: str, parent: Optional[ET.Element] = None, **attrib: str) -> ET.Element:
    qualified = {qualify(key.replace("__", ":")): value for key, value in attrib.items()}
    if parent is None:
        return ET.Element(qualify(tag), qualified)
    return ET.SubElement(parent, qualify(tag), qualified)


def _append_raw(parent: ET.Element, raw: RawXML) -> None:
    try:
        wrapper = ET.fromstring(f"<raw {namespace_declarations(raw.namespaces)}>{raw}</raw>")
    except ET.ParseError as exc:
        raise DrawingEncodeError(f"raw XML inside <{parent.tag}> is not well-formed: {exc}") from exc
    parent.text = wrapper.text
    for child in wrapper:
        parent.append(child)


def drawing_to_element(drawing: Drawing, parent: Optional[ET.Element] = None) -> ET.Element:
    element = _element("w:drawing", parent)
    if isinstance(drawing.frame, Inline):
        inline_to_element(drawing.frame, element)
    elif isinstance(drawing.frame, Anchor):
        anchor_to_element(drawing.frame, element)
    return element


def inline_to_element(inline: Inline, parent: Optional[ET.Element] = None) -> ET.Element:
    element = _element(
        "wp:inline",
        parent,
        distT=str(inline.dist_t),
        distB=str(inline.dist_b),
        distL=str(inline.dist_l),
        distR=str(inline.dist_r),
    )
    _extent(element, inline.extent, inline.effect_extent)
    _frame_tail(element, inline.doc_pr, inline.frame_properties, inline.graphic)
    return element


def anchor_to_element(anchor: Anchor, parent: Optional[ET.Element] = None) -> ET.Element:
    element = _element(
        "wp:anchor",
        parent,
        distT=str(anchor.dist_t),
        distB=str(anchor.dist_b),
        distL=str(anchor.dist_l),
        distR=str(anchor.dist_r),
        simplePos=str(anchor.simple_pos),
        relativeHeight=str(anchor.relative_height),
        behindDoc=str(anchor.behind_doc),
        locked=str(anchor.locked),
        layoutInCell=str(anchor.layout_in_cell),
        allowOverlap=str(anchor.allow_overlap),
    )
    if anchor.simple_pos_xy is not None:
        _simple_pos(element, anchor.simple_pos_xy)
    if anchor.position_h is not None:
        _position(element, "wp:positionH", anchor.position_h)
    if anchor.position_v is not None:
        _position(element, "wp:positionV", anchor.position_v)
    _extent(element, anchor.extent, anchor.effect_extent)
    if isinstance(anchor.wrap, WrapNone):
        _element("wp:wrapNone", element)
    elif isinstance(anchor.wrap, WrapSquare):
        _element("wp:wrapSquare", element, wrapText=anchor.wrap.wrap_text)
    elif isinstance(anchor.wrap, WrapTopAndBottom):
        _element("wp:wrapTopAndBottom", element)
    _frame_tail(element, anchor.doc_pr, anchor.frame_properties, anchor.graphic)
    return element


def _simple_pos(parent: ET.Element, pos: SimplePos) -> None:
    _element("wp:simplePos", parent, x=str(pos.x), y=str(pos.y))


def _position(parent: ET.Element, tag: str, position: Union[PositionH, PositionV]) -> None:
    element = _element(tag, parent, relativeFrom=position.relative_from)
    if position.align is not None:
        _element("wp:align", element).text = position.align
    if position.pos_offset is not None:
        _element("wp:posOffset", element).text = str(position.pos_offset)


def _extent(parent: ET.Element, extent: Optional[Extent], effect_extent: Optional[EffectExtent]) -> None:
    if extent is not None:
        _element("wp:extent", parent, cx=str(extent.cx), cy=str(extent.cy))
    if effect_extent is not None:
        _element(
            "wp:effectExtent",
            parent,
            l=str(effect_extent.l),
            t=str(effect_extent.t),
            r=str(effect_extent.r),
            b=str(effect_extent.b),
        )


def _frame_tail(
    parent: ET.Element,
    doc_pr: Optional[DocPr],
    frame_properties: Optional[GraphicFrameProperties],
    graphic: Optional[Graphic],
) -> None:
    if doc_pr is not None:
        element = _element("wp:docPr", parent, id=str(doc_pr.id), name=doc_pr.name)
        if doc_pr.descr is not None:
            element.set("descr", doc_pr.descr)
    if frame_properties is not None:
        props = _element("wp:cNvGraphicFramePr", parent)
        if frame_properties.locks is not None:
            locks = _element("a:graphicFrameLocks", props)
            if frame_properties.locks.no_change_aspect is not None:
                locks.set("noChangeAspect", str(frame_properties.locks.no_change_aspect))
    if graphic is not None:
        graphic_to_element(graphic, parent)


def graphic_to_element(graphic: Graphic, parent: Optional[ET.Element] = None) -> ET.Element:
    element = _element("a:graphic", parent)
    if graphic.data is not None:
        data = _element("a:graphicData", element, uri=graphic.data.uri)
        if graphic.data.pic is not None:
            _picture(data, graphic.data.pic)
    return element


def _picture(parent: ET.Element, picture: Picture) -> None:
    element = _element("pic:pic", parent)
    if picture.nv_pic_pr is not None:
        nv_pic_pr = _element("pic:nvPicPr", element)
        c_nv_pr = picture.nv_pic_pr.c_nv_pr
        if c_nv_pr is not None:
            _element("pic:cNvPr", nv_pic_pr, id=c_nv_pr.id, name=c_nv_pr.name)
        _element("pic:cNvPicPr", nv_pic_pr)
    if picture.blip_fill is not None:
        _blip_fill(element, picture.blip_fill)
    if picture.sp_pr is not None:
        _shape_properties(element, picture.sp_pr)


def _blip_fill(parent: ET.Element, blip_fill: BlipFill) -> None:
    element = _element("pic:blipFill", parent)
    blip = blip_fill.blip
    if blip is not None:
        blip_el = _element("a:blip", element, r__embed=blip.embed)
        if blip.cstate:
            blip_el.set("cstate", blip.cstate)
        if blip.alpha_mod_fix is not None:
            _element("a:alphaModFix", blip_el, amt=str(blip.alpha_mod_fix.amount))
    if blip_fill.stretch is not None:
        stretch = _element("a:stretch", element)
        if blip_fill.stretch.fill_rect:
            _element("a:fillRect", stretch)


def _shape_properties(parent: ET.Element, shape: ShapeProperties) -> None:
    element = _element("pic:spPr", parent)
    if shape.xfrm is not None:
        _transform(element, shape.xfrm)
    if shape.prst_geom is not None:
        geometry = _element("a:prstGeom", element, prst=shape.prst_geom.prst)
        if shape.prst_geom.av_lst is not None:
            _append_raw(_element("a:avLst", geometry), shape.prst_geom.av_lst)


def _transform(parent: ET.Element, xfrm: Transform2D) -> None:
    element = _element("a:xfrm", parent)
    for name, value in (("rot", xfrm.rot), ("flipH", xfrm.flip_h), ("flipV", xfrm.flip_v)):
        if value is not None:
            element.set(name, str(value))
    if xfrm.off is not None:
        _element("a:off", element, x=str(xfrm.off.x), y=str(xfrm.off.y))
    if xfrm.ext is not None:
        _element("a:ext", element, cx=str(xfrm.ext.cx), cy=str(xfrm.ext.cy))


def run_to_element(run: Run, parent: Optional[ET.Element] = None) -> ET.Element:
    element = _element("w:r", parent)
    if run.properties is not None:
        _append_raw(_element("w:rPr", element), run.properties)
    for piece in _RUN_SPECIALS.split(run.text):
        if piece == "\t":
            _element("w:tab", element)
        elif piece == "\n":
            _element("w:br", element)
        elif piece:
            text = _element("w:t", element)
            if piece != piece.strip():
                text.set("{http://www.w3.org/XML/1998/namespace}space", "preserve")
            text.text = piece
    if run.drawing is not None:
        drawing_to_element(run.drawing, element)
    return element


def hyperlink_to_element(hyperlink: Hyperlink, parent: Optional[ET.Element] = None) -> ET.Element:
    element = _element("w:hyperlink", parent, r__id=hyperlink.id)
    if hyperlink.anchor is not None:
        element.set(qualify("w:anchor"), hyperlink.anchor)
    run_to_element(hyperlink.run, element)
    return element


def to_element(record: Record) -> ET.Element:
    if isinstance(record, Drawing):
        return drawing_to_element(record)
    if isinstance(record, Inline):
        return inline_to_element(record)
    if isinstance(record, Anchor):
        return anchor_to_element(record)
    if isinstance(record, Graphic):
        return graphic_to_element(record)
    if isinstance(record, Hyperlink):
        return hyperlink_to_element(record)
    if isinstance(record, Run):
        return run_to_element(record)
    raise DrawingEncodeError(f"cannot serialize {type(record).__name__}")


def to_xml(record: Record) -> str:
    """Serialize a record to an XML string with the usual OpenXML prefixes."""
    return ET.tostring(to_element(record), encoding="unicode")
