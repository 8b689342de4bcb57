"""
PDF emission

Replays a PaginatedDocument onto a ReportLab canvas. The document is laid
out top-down in millimetres; ReportLab works bottom-up in points.
"""

import os
from pathlib import Path
from typing import Union

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from pocketbook_press.logging_config import get_logger
from pocketbook_press.renderer.document import PaginatedDocument, RectOp, TextOp

logger = get_logger(__name__)


def _set_fill(c: canvas.Canvas, rgb):
    r, g, b = rgb
    c.setFillColorRGB(r / 255.0, g / 255.0, b / 255.0)


def _draw_text(c: canvas.Canvas, op: TextOp, page_height: float):
    c.setFont(op.font_name, op.font_size)
    _set_fill(c, op.color)
    x = op.x * mm
    y = (page_height - op.y) * mm
    if op.align == "center":
        c.drawCentredString(x, y, op.text)
    elif op.align == "right":
        c.drawRightString(x, y, op.text)
    else:
        c.drawString(x, y, op.text)


def _draw_rect(c: canvas.Canvas, op: RectOp, page_height: float):
    _set_fill(c, op.fill_color)
    r, g, b = op.stroke_color
    c.setStrokeColorRGB(r / 255.0, g / 255.0, b / 255.0)
    c.setLineWidth(op.line_width * mm)
    c.rect(
        op.x * mm,
        (page_height - op.y - op.height) * mm,
        op.width * mm,
        op.height * mm,
        stroke=1 if "S" in op.style or "D" in op.style else 0,
        fill=1 if "F" in op.style else 0,
    )


def write_pdf(doc: PaginatedDocument, out_path: Union[str, Path]) -> Path:
    """
    Save a laid-out document as a PDF.

    Args:
        doc: Fully laid-out (and numbered) document
        out_path: Destination file

    Returns:
        Path of the written file
    """
    out_path = Path(out_path)
    height = doc.geometry.height

    c = canvas.Canvas(str(out_path), pagesize=(doc.geometry.width * mm, height * mm))
    if doc.title:
        c.setTitle(doc.title)
    if doc.author:
        c.setAuthor(doc.author)

    for page in doc.pages:
        for op in page.ops:
            c.saveState()
            if isinstance(op, RectOp):
                _draw_rect(c, op, height)
            else:
                _draw_text(c, op, height)
            c.restoreState()
        c.showPage()

    try:
        c.save()
    except Exception:
        # Never leave a truncated PDF behind
        if out_path.exists():
            os.remove(out_path)
        raise

    logger.info("Wrote %s (%d pages)", out_path, doc.page_count)
    return out_path
