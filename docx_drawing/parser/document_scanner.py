"""Walk a WordprocessingML part and decode the drawings and hyperlinks it contains."""
from __future__ import annotations

from typing import BinaryIO, Iterator, Optional, TextIO, Union

from docx_drawing.model.drawing import Drawing
from docx_drawing.model.link import Hyperlink
from docx_drawing.parser.drawing_parser import decode_drawing
from docx_drawing.parser.link_parser import RunDecoder, decode_hyperlink
from docx_drawing.parser.token_stream import StartElement, TokenStream
from docx_drawing.utils.logger import get_logger

LOGGER = get_logger(__name__)

Fragment = Union[Drawing, Hyperlink]
Source = Union[bytes, str, BinaryIO, TextIO, TokenStream]


class DocumentScanner:
    """Yields ``Drawing`` and ``Hyperlink`` records in document order.

    Everything else in the part is passed over; drawings nested in a
    hyperlink come back through the hyperlink's run.
    """

    def __init__(self, run_decoder: Optional[RunDecoder] = None) -> None:
        self._run_decoder = run_decoder

    def scan(self, source: Source) -> Iterator[Fragment]:
        stream = source if isinstance(source, TokenStream) else TokenStream(source)
        drawings = hyperlinks = 0
        for token in stream:
            if not isinstance(token, StartElement):
                continue
            local = token.name.local
            if local == "drawing":
                scope = stream.scope(token)
                fragment: Fragment = decode_drawing(scope, token)
                drawings += 1
            elif local == "hyperlink":
                scope = stream.scope(token)
                fragment = decode_hyperlink(scope, token, run_decoder=self._run_decoder)
                hyperlinks += 1
            else:
                continue
            scope.drain()
            yield fragment
        LOGGER.debug("Scanned %d drawings and %d hyperlinks", drawings, hyperlinks)


def iter_fragments(source: Source, run_decoder: Optional[RunDecoder] = None) -> Iterator[Fragment]:
    """Shortcut for ``DocumentScanner(run_decoder).scan(source)``."""
    return DocumentScanner(run_decoder).scan(source)
