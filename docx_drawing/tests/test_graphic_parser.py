"""Tests for the graphic payload chain."""
import unittest

from docx_drawing.model.graphic import AlphaModFix, Offset, PositiveSize, RawXML
from docx_drawing.parser.decoder import parse_fragment
from docx_drawing.parser.drawing_parser import decode_drawing
from docx_drawing.parser.graphic_parser import decode_graphic, decode_shape_properties

A_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
PIC_NS = "http://schemas.openxmlformats.org/drawingml/2006/picture"
R_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
WP_NS = "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"
W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

picture_graphic_xml = (
    f'<a:graphic xmlns:a="{A_NS}">'
    f'<a:graphicData uri="{PIC_NS}">'
    f'<pic:pic xmlns:pic="{PIC_NS}">'
    '<pic:nvPicPr><pic:cNvPr id="0" name="image1.png"/><pic:cNvPicPr/></pic:nvPicPr>'
    "<pic:blipFill>"
    f'<a:blip xmlns:r="{R_NS}" r:embed="rId4" cstate="print"><a:alphaModFix amt="50000"/></a:blip>'
    "<a:stretch><a:fillRect/></a:stretch>"
    "</pic:blipFill>"
    "<pic:spPr>"
    '<a:xfrm rot="5400000" flipH="1"><a:off x="0" y="0"/><a:ext cx="2743200" cy="1828800"/></a:xfrm>'
    '<a:prstGeom prst="rect"><a:avLst/></a:prstGeom>'
    "</pic:spPr>"
    "</pic:pic>"
    "</a:graphicData>"
    "</a:graphic>"
)


class GraphicParserTest(unittest.TestCase):
    """Decode ``a:graphic`` down to the picture's shape properties."""

    def test_graphic_data_uri_and_namespace_markers(self) -> None:
        graphic = parse_fragment(picture_graphic_xml, decode_graphic)

        self.assertEqual(graphic.xmlns_a, A_NS)
        self.assertEqual(graphic.data.uri, PIC_NS)
        self.assertEqual(graphic.data.pic.xmlns_pic, PIC_NS)

    def test_uri_survives_deep_nesting(self) -> None:
        xml = (
            f'<w:drawing xmlns:w="{W_NS}" xmlns:wp="{WP_NS}">'
            f"<wp:inline>{picture_graphic_xml}</wp:inline>"
            "</w:drawing>"
        )
        drawing = parse_fragment(xml, decode_drawing)
        self.assertEqual(drawing.inline.graphic.data.uri, PIC_NS)

    def test_picture_non_visual_properties(self) -> None:
        pic = parse_fragment(picture_graphic_xml, decode_graphic).data.pic
        self.assertEqual(pic.nv_pic_pr.c_nv_pr.id, "0")
        self.assertEqual(pic.nv_pic_pr.c_nv_pr.name, "image1.png")

    def test_blip_fill(self) -> None:
        blip_fill = parse_fragment(picture_graphic_xml, decode_graphic).data.pic.blip_fill
        self.assertEqual(blip_fill.blip.embed, "rId4")
        self.assertEqual(blip_fill.blip.cstate, "print")
        self.assertEqual(blip_fill.blip.alpha_mod_fix, AlphaModFix(amount=50000))
        self.assertTrue(blip_fill.stretch.fill_rect)

    def test_blip_without_alpha_adjustment(self) -> None:
        xml = picture_graphic_xml.replace('<a:alphaModFix amt="50000"/>', "")
        blip = parse_fragment(xml, decode_graphic).data.pic.blip_fill.blip
        self.assertIsNone(blip.alpha_mod_fix)

    def test_transform(self) -> None:
        xfrm = parse_fragment(picture_graphic_xml, decode_graphic).data.pic.sp_pr.xfrm
        self.assertEqual(xfrm.rot, 5400000)
        self.assertEqual(xfrm.flip_h, 1)
        self.assertIsNone(xfrm.flip_v)
        self.assertEqual(xfrm.off, Offset(x=0, y=0))
        self.assertEqual(xfrm.ext, PositiveSize(cx=2743200, cy=1828800))

    def test_empty_adjustment_list_is_present_but_empty(self) -> None:
        geometry = parse_fragment(picture_graphic_xml, decode_graphic).data.pic.sp_pr.prst_geom
        self.assertEqual(geometry.prst, "rect")
        self.assertEqual(geometry.av_lst, RawXML(b""))

    def test_missing_adjustment_list_is_absent(self) -> None:
        xml = picture_graphic_xml.replace("<a:avLst/>", "")
        geometry = parse_fragment(xml, decode_graphic).data.pic.sp_pr.prst_geom
        self.assertEqual(geometry.prst, "rect")
        self.assertIsNone(geometry.av_lst)


class PresetGeometryPassthroughTest(unittest.TestCase):
    """Adjustment values are kept as raw XML rather than modeled."""

    def test_adjustment_values_captured_verbatim(self) -> None:
        xml = (
            f'<pic:spPr xmlns:pic="{PIC_NS}" xmlns:a="{A_NS}">'
            '<a:prstGeom prst="roundRect">'
            '<a:avLst><a:gd name="adj" fmla="val 16667"/><a:gd name="adj2" fmla="val 0"/></a:avLst>'
            "</a:prstGeom>"
            "</pic:spPr>"
        )
        geometry = parse_fragment(xml, decode_shape_properties).prst_geom

        self.assertEqual(geometry.prst, "roundRect")
        self.assertEqual(
            bytes(geometry.av_lst),
            b'<a:gd name="adj" fmla="val 16667"></a:gd><a:gd name="adj2" fmla="val 0"></a:gd>',
        )

    def test_whitespace_and_escaping_are_preserved(self) -> None:
        xml = (
            f'<a:prstGeom xmlns:a="{A_NS}" prst="rect">'
            '<a:avLst>\n  <a:gd name="a&amp;b" fmla="val 1"/>\n</a:avLst>'
            "</a:prstGeom>"
        )
        geometry = parse_fragment(
            f'<pic:spPr xmlns:pic="{PIC_NS}">{xml}</pic:spPr>',
            decode_shape_properties,
        ).prst_geom
        self.assertEqual(str(geometry.av_lst), '\n  <a:gd name="a&amp;b" fmla="val 1"></a:gd>\n')

    def test_default_namespace_is_recorded(self) -> None:
        xml = (
            f'<pic:spPr xmlns:pic="{PIC_NS}" xmlns="{A_NS}">'
            '<prstGeom prst="triangle"><avLst><gd name="adj" fmla="val 1"/></avLst></prstGeom>'
            "</pic:spPr>"
        )
        geometry = parse_fragment(xml, decode_shape_properties).prst_geom

        self.assertEqual(geometry.prst, "triangle")
        self.assertEqual(geometry.av_lst, RawXML(b'<gd name="adj" fmla="val 1"></gd>', (("", A_NS),)))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
