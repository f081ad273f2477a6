"""Tests for scanning a whole document part for drawings and hyperlinks."""
import io
import unittest

from docx_drawing.model.drawing import Drawing
from docx_drawing.model.link import Hyperlink, Run
from docx_drawing.parser.document_scanner import DocumentScanner, iter_fragments
from docx_drawing.parser.errors import MalformedAttributeError, StreamReadError

document_xml = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main"
            xmlns:wp="http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"
            xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main"
            xmlns:r="http://schemas.openxmlformats.org/officeDocument/2006/relationships">
  <w:body>
    <w:p>
      <w:r><w:t>Before the picture</w:t></w:r>
      <w:r>
        <w:drawing>
          <wp:inline distT="0" distB="0" distL="0" distR="0">
            <wp:extent cx="914400" cy="457200"/>
            <wp:docPr id="1" name="Picture 1"/>
          </wp:inline>
        </w:drawing>
      </w:r>
    </w:p>
    <w:p>
      <w:hyperlink r:id="rId8">
        <w:r><w:t>Visit the site</w:t></w:r>
      </w:hyperlink>
    </w:p>
    <w:tbl>
      <w:tr>
        <w:tc>
          <w:p>
            <w:r>
              <w:drawing>
                <wp:anchor distT="0" distB="0" distL="0" distR="0" simplePos="0" relativeHeight="3"
                           behindDoc="1" locked="0" layoutInCell="1" allowOverlap="1">
                  <wp:wrapNone/>
                </wp:anchor>
              </w:drawing>
            </w:r>
          </w:p>
        </w:tc>
      </w:tr>
    </w:tbl>
    <w:sectPr/>
  </w:body>
</w:document>
"""


class DocumentScannerTest(unittest.TestCase):
    """Fragments come back decoded and in document order."""

    def test_fragments_in_document_order(self) -> None:
        fragments = list(iter_fragments(document_xml.encode("utf-8")))

        self.assertEqual([type(fragment) for fragment in fragments], [Drawing, Hyperlink, Drawing])
        inline = fragments[0].inline
        self.assertEqual(inline.extent.cx, 914400)
        self.assertEqual(inline.doc_pr.name, "Picture 1")
        self.assertEqual(fragments[1].id, "rId8")
        self.assertEqual(fragments[1].run.text, "Visit the site")
        anchor = fragments[2].anchor
        self.assertEqual(anchor.behind_doc, 1)
        self.assertIsNotNone(anchor.wrap_none)

    def test_scanner_reads_file_objects(self) -> None:
        fragments = list(DocumentScanner().scan(io.BytesIO(document_xml.encode("utf-8"))))
        self.assertEqual(len(fragments), 3)

    def test_scanner_passes_run_decoder_to_hyperlinks(self) -> None:
        scanner = DocumentScanner(run_decoder=lambda scope, start: Run(text="replaced"))
        hyperlink = [fragment for fragment in scanner.scan(document_xml) if isinstance(fragment, Hyperlink)][0]
        self.assertEqual(hyperlink.run.text, "replaced")

    def test_decode_error_stops_scan(self) -> None:
        broken = document_xml.replace('cx="914400"', 'cx="wide"')
        with self.assertRaises(MalformedAttributeError):
            list(iter_fragments(broken))

    def test_truncated_document_raises(self) -> None:
        with self.assertRaises(StreamReadError):
            list(iter_fragments(document_xml[:200].encode("utf-8")))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
