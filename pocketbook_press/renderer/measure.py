"""
Text measurement

The layout engine never measures glyphs itself. It asks a TextMeasurer to
split a string into lines that fit a width, so tests can swap in a
character-count measurer.
"""

from typing import Callable, List, Protocol

from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth


class TextMeasurer(Protocol):
    def split_to_width(self, text: str, font_name: str, font_size: float, max_width: float) -> List[str]:
        """Split text into lines no wider than max_width (mm)."""
        ...


def _break_word(word: str, width_of: Callable[[str], float], max_width: float) -> List[str]:
    """Cut a word that cannot fit on one line into line-sized pieces."""
    pieces = []
    rest = word
    while len(rest) > 1 and width_of(rest) > max_width:
        cut = 1
        while cut < len(rest) and width_of(rest[: cut + 1]) <= max_width:
            cut += 1
        pieces.append(rest[:cut])
        rest = rest[cut:]
    pieces.append(rest)
    return pieces


def wrap_words(text: str, width_of: Callable[[str], float], max_width: float) -> List[str]:
    """
    Greedy word wrap.

    Explicit newlines always end a line. Leading spaces of a line are kept
    (paragraph indent); other runs of spaces collapse to one. Only ASCII
    spaces are break points, so non-breaking spaces stay glued.
    """
    lines: List[str] = []
    for raw in text.split("\n"):
        words = [w for w in raw.split(" ") if w]
        if not words:
            lines.append(raw)
            continue

        indent = raw[: len(raw) - len(raw.lstrip(" "))]
        current = ""
        for word in words:
            candidate = f"{current} {word}" if current else indent + word
            if width_of(candidate) <= max_width:
                current = candidate
                continue
            if current:
                lines.append(current)
                candidate = word
            pieces = _break_word(candidate, width_of, max_width)
            lines.extend(pieces[:-1])
            current = pieces[-1]
        lines.append(current)
    return lines


class ReportLabMeasurer:
    """Measures with the AFM metrics of the standard PDF fonts."""

    def split_to_width(self, text: str, font_name: str, font_size: float, max_width: float) -> List[str]:
        return wrap_words(
            text,
            lambda s: stringWidth(s, font_name, font_size),
            max_width * mm,
        )
