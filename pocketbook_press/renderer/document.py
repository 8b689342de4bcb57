"""
Paginated document

An in-memory canvas that records positioned draw operations page by page.
Layout code draws onto it the way it would draw onto a PDF canvas; the PDF
writer replays the recorded operations afterwards. Positions are millimetres
from the top-left corner of the page, text y is the baseline.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from pocketbook_press.config.sizes import PageGeometry
from pocketbook_press.renderer.fonts import resolve_font
from pocketbook_press.renderer.measure import ReportLabMeasurer, TextMeasurer

RGB = Tuple[int, int, int]

MM_PER_PT = 25.4 / 72.0
LINE_HEIGHT_FACTOR = 1.15  # spacing between lines of a multi-line text call


@dataclass(frozen=True)
class TextOp:
    text: str
    x: float
    y: float
    font_name: str
    font_size: float
    color: RGB = (0, 0, 0)
    align: str = "left"  # "left" | "center" | "right"


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    style: str = "S"  # "F" fill | "S" stroke | "FD" both
    fill_color: RGB = (0, 0, 0)
    stroke_color: RGB = (0, 0, 0)
    line_width: float = 0.2


DrawOp = Union[TextOp, RectOp]


@dataclass
class Page:
    number: int
    ops: List[DrawOp] = field(default_factory=list)

    @property
    def texts(self) -> List[TextOp]:
        return [op for op in self.ops if isinstance(op, TextOp)]


class PaginatedDocument:
    """Ordered pages of draw operations plus the current graphics state"""

    def __init__(
        self,
        geometry: PageGeometry,
        measurer: Optional[TextMeasurer] = None,
        font_family: str = "times",
        title: str = "",
        author: str = "",
    ):
        self.geometry = geometry
        self.measurer = measurer or ReportLabMeasurer()
        self.title = title
        self.author = author
        self.pages: List[Page] = [Page(number=1)]
        self._current = 0

        self.font_family = font_family
        self.font_style = "normal"
        self.font_name = resolve_font(font_family, "normal")
        self.font_size = 16.0
        self.text_color: RGB = (0, 0, 0)
        self.fill_color: RGB = (0, 0, 0)
        self.draw_color: RGB = (0, 0, 0)
        self.line_width = 0.2

    # Graphics state

    def set_font(self, family: str, style: str = "normal"):
        self.font_name = resolve_font(family, style)
        self.font_family = family
        self.font_style = style

    def set_font_size(self, size: float):
        self.font_size = size

    def set_text_color(self, r: int, g: int, b: int):
        self.text_color = (r, g, b)

    def set_fill_color(self, r: int, g: int, b: int):
        self.fill_color = (r, g, b)

    def set_draw_color(self, r: int, g: int, b: int):
        self.draw_color = (r, g, b)

    def set_line_width(self, width: float):
        self.line_width = width

    # Pages

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def current_page(self) -> Page:
        return self.pages[self._current]

    def add_page(self) -> Page:
        """Append a blank page and make it current."""
        page = Page(number=len(self.pages) + 1)
        self.pages.append(page)
        self._current = len(self.pages) - 1
        return page

    def set_page(self, number: int):
        if not 1 <= number <= len(self.pages):
            raise ValueError(f"Page {number} out of range (1..{len(self.pages)})")
        self._current = number - 1

    # Drawing

    def split_text_to_size(self, text: str, max_width: float) -> List[str]:
        """Wrap text at the current font and size."""
        return self.measurer.split_to_width(text, self.font_name, self.font_size, max_width)

    def text(self, text: Union[str, Sequence[str]], x: float, y: float, align: str = "left"):
        """Draw one line, or several lines stacked from baseline y down."""
        lines = [text] if isinstance(text, str) else list(text)
        spacing = self.font_size * LINE_HEIGHT_FACTOR * MM_PER_PT
        for i, line in enumerate(lines):
            self.current_page.ops.append(TextOp(
                text=line,
                x=x,
                y=y + i * spacing,
                font_name=self.font_name,
                font_size=self.font_size,
                color=self.text_color,
                align=align,
            ))

    def rect(self, x: float, y: float, width: float, height: float, style: str = "S"):
        self.current_page.ops.append(RectOp(
            x=x,
            y=y,
            width=width,
            height=height,
            style=style,
            fill_color=self.fill_color,
            stroke_color=self.draw_color,
            line_width=self.line_width,
        ))
