"""Shared fixtures for layout tests."""

import json

import pytest

from pocketbook_press.models.manuscript import Chapter, Manuscript
from pocketbook_press.renderer.measure import wrap_words


class CharMeasurer:
    """Wraps by character count so layouts are deterministic without font metrics."""

    def __init__(self, chars_per_line: int = 25):
        self.chars_per_line = chars_per_line

    def split_to_width(self, text, font_name, font_size, max_width):
        return wrap_words(text, len, self.chars_per_line)


WORD = "abcdefghijklmnopqrs"  # 19 chars: with a 25-char line each word fills one line


def one_word_per_line(count: int) -> str:
    """Paragraph that wraps to exactly `count` lines with CharMeasurer(25)."""
    return " ".join([WORD] * count)


@pytest.fixture
def measurer():
    return CharMeasurer(25)


@pytest.fixture
def short_manuscript():
    return Manuscript(
        title="Test",
        subtitle="A short book",
        chapters=[Chapter(title="Opening", content="First paragraph.\n\nSecond paragraph.")],
    )


@pytest.fixture
def manuscript_file(tmp_path):
    data = {
        "title": "Mon Livre! 2024",
        "subtitle": "Nouvelles",
        "chapters": [
            {"title": "Start", "content": "It was a bright morning.\nThe train left at eight.\n\nNobody waved."},
            {"title": "Middle", "content": " ".join(["Long text"] * 400)},
        ],
    }
    path = tmp_path / "book.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
