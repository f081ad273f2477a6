"""Decoders for the ``a:graphic`` payload chain of a drawing frame.

Some attributes belong to the child's own start tag but are not part of what
the child's decoder models (``graphicData/@uri``, ``pic:pic``'s namespace
declaration, ``prstGeom/@prst``). The caller reads those from the child's
start element and attaches them once the structural decode has returned.
"""
from __future__ import annotations

from docx_drawing.model.graphic import (
    AlphaModFix,
    Blip,
    BlipFill,
    Graphic,
    GraphicData,
    NonVisualDrawingProperties,
    NonVisualPicProperties,
    Offset,
    Picture,
    PositiveSize,
    PresetGeometry,
    ShapeProperties,
    Stretch,
    Transform2D,
)
from docx_drawing.parser.decoder import (
    apply_attributes,
    as_int,
    as_str,
    capture_raw_xml,
    decode_children,
    int_attr,
    store,
)
from docx_drawing.parser.token_stream import ElementScope, StartElement

_BLIP_ATTRIBUTES = {
    "embed": ("embed", as_str),
    "cstate": ("cstate", as_str),
}

_TRANSFORM_ATTRIBUTES = {
    "rot": ("rot", as_int),
    "flipH": ("flip_h", as_int),
    "flipV": ("flip_v", as_int),
}


def decode_graphic(scope: ElementScope, start: StartElement) -> Graphic:
    graphic = Graphic(xmlns_a=start.namespace_uri("a"))

    def graphic_data(child: ElementScope, child_start: StartElement) -> None:
        data = decode_graphic_data(child, child_start)
        data.uri = child_start.get("uri", "")
        graphic.data = data

    decode_children(scope, {"graphicData": graphic_data})
    return graphic


def decode_graphic_data(scope: ElementScope, start: StartElement) -> GraphicData:
    """Decode the payload of ``a:graphicData``; the caller attaches ``uri``."""
    data = GraphicData()

    def pic(child: ElementScope, child_start: StartElement) -> None:
        picture = decode_picture(child, child_start)
        picture.xmlns_pic = child_start.namespace_uri("pic")
        data.pic = picture

    decode_children(scope, {"pic": pic})
    return data


def decode_picture(scope: ElementScope, start: StartElement) -> Picture:
    picture = Picture()
    decode_children(
        scope,
        {
            "nvPicPr": store(picture, "nv_pic_pr", decode_nv_pic_pr),
            "blipFill": store(picture, "blip_fill", decode_blip_fill),
            "spPr": store(picture, "sp_pr", decode_shape_properties),
        },
    )
    return picture


def decode_nv_pic_pr(scope: ElementScope, start: StartElement) -> NonVisualPicProperties:
    props = NonVisualPicProperties()

    def c_nv_pr(child: ElementScope, child_start: StartElement) -> None:
        props.c_nv_pr = NonVisualDrawingProperties(
            id=child_start.get("id", ""),
            name=child_start.get("name", ""),
        )

    decode_children(scope, {"cNvPr": c_nv_pr})
    return props


def decode_blip_fill(scope: ElementScope, start: StartElement) -> BlipFill:
    blip_fill = BlipFill()
    decode_children(
        scope,
        {
            "blip": store(blip_fill, "blip", decode_blip),
            "stretch": store(blip_fill, "stretch", decode_stretch),
        },
    )
    return blip_fill


def decode_blip(scope: ElementScope, start: StartElement) -> Blip:
    blip = Blip()
    apply_attributes(blip, start, _BLIP_ATTRIBUTES)

    def alpha_mod_fix(child: ElementScope, child_start: StartElement) -> None:
        blip.alpha_mod_fix = AlphaModFix(amount=int_attr(child_start, "amt", AlphaModFix().amount))

    decode_children(scope, {"alphaModFix": alpha_mod_fix})
    return blip


def decode_stretch(scope: ElementScope, start: StartElement) -> Stretch:
    stretch = Stretch()

    def fill_rect(child: ElementScope, child_start: StartElement) -> None:
        stretch.fill_rect = True

    decode_children(scope, {"fillRect": fill_rect})
    return stretch


def decode_shape_properties(scope: ElementScope, start: StartElement) -> ShapeProperties:
    shape = ShapeProperties()

    def prst_geom(child: ElementScope, child_start: StartElement) -> None:
        geometry = decode_preset_geometry(child, child_start)
        geometry.prst = child_start.get("prst", "")
        shape.prst_geom = geometry

    decode_children(
        scope,
        {
            "xfrm": store(shape, "xfrm", decode_transform),
            "prstGeom": prst_geom,
        },
    )
    return shape


def decode_transform(scope: ElementScope, start: StartElement) -> Transform2D:
    xfrm = Transform2D()
    apply_attributes(xfrm, start, _TRANSFORM_ATTRIBUTES)

    def off(child: ElementScope, child_start: StartElement) -> None:
        xfrm.off = Offset(x=int_attr(child_start, "x"), y=int_attr(child_start, "y"))

    def ext(child: ElementScope, child_start: StartElement) -> None:
        xfrm.ext = PositiveSize(cx=int_attr(child_start, "cx"), cy=int_attr(child_start, "cy"))

    decode_children(scope, {"off": off, "ext": ext})
    return xfrm


def decode_preset_geometry(scope: ElementScope, start: StartElement) -> PresetGeometry:
    """Decode ``a:prstGeom`` children; the caller attaches ``prst``.

    The adjustment list is kept as raw XML, never modeled value by value.
    """
    geometry = PresetGeometry()

    def av_lst(child: ElementScope, child_start: StartElement) -> None:
        geometry.av_lst = capture_raw_xml(child)

    decode_children(scope, {"avLst": av_lst})
    return geometry
