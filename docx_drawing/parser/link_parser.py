"""Decoders for ``w:hyperlink`` and the minimal ``w:r`` run it delegates to."""
from __future__ import annotations

from typing import Callable, List, Optional

from docx_drawing.model.link import Hyperlink, Run
from docx_drawing.parser.decoder import capture_raw_xml, decode_children, read_text, store
from docx_drawing.parser.drawing_parser import decode_drawing
from docx_drawing.parser.token_stream import ElementScope, StartElement
from docx_drawing.utils.logger import get_logger

LOGGER = get_logger(__name__)

RunDecoder = Callable[[ElementScope, StartElement], Run]


def decode_run(scope: ElementScope, start: StartElement) -> Run:
    """Collect a run's text, its raw ``w:rPr`` and an embedded drawing if any."""
    run = Run()
    parts: List[str] = []

    def text(child: ElementScope, child_start: StartElement) -> None:
        parts.append(read_text(child))

    def tab(child: ElementScope, child_start: StartElement) -> None:
        parts.append("\t")

    def line_break(child: ElementScope, child_start: StartElement) -> None:
        parts.append("\n")

    def properties(child: ElementScope, child_start: StartElement) -> None:
        run.properties = capture_raw_xml(child)

    decode_children(
        scope,
        {
            "rPr": properties,
            "t": text,
            "tab": tab,
            "br": line_break,
            "cr": line_break,
            "drawing": store(run, "drawing", decode_drawing),
        },
    )
    run.text = "".join(parts)
    return run


def decode_hyperlink(
    scope: ElementScope,
    start: StartElement,
    run_decoder: Optional[RunDecoder] = None,
) -> Hyperlink:
    """Decode ``w:hyperlink``: ``r:id`` from the start tag, its run via ``run_decoder``."""
    decode = run_decoder or decode_run
    hyperlink = Hyperlink(id=start.get("id", ""), anchor=start.get("anchor"))
    seen_runs = 0

    def run(child: ElementScope, child_start: StartElement) -> None:
        nonlocal seen_runs
        seen_runs += 1
        if seen_runs > 1:
            LOGGER.debug("Hyperlink %s has more than one run; keeping the last", hyperlink.id)
        hyperlink.run = decode(child, child_start)

    decode_children(scope, {"r": run})
    return hyperlink
