"""Tests for word wrapping and the ReportLab measurer."""

from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth

from pocketbook_press.renderer.measure import ReportLabMeasurer, wrap_words


class TestWrapWords:
    def test_fits_on_one_line(self):
        assert wrap_words("a b c", len, 10) == ["a b c"]

    def test_breaks_between_words(self):
        assert wrap_words("aaa bbb ccc", len, 7) == ["aaa bbb", "ccc"]

    def test_keeps_leading_indent(self):
        assert wrap_words("   aaa bbb", len, 7) == ["   aaa", "bbb"]

    def test_collapses_inner_whitespace(self):
        assert wrap_words("aaa    bbb", len, 20) == ["aaa bbb"]

    def test_explicit_newline_ends_line(self):
        assert wrap_words("aaa\nbbb", len, 20) == ["aaa", "bbb"]

    def test_long_word_broken_by_characters(self):
        assert wrap_words("abcdefghij", len, 4) == ["abcd", "efgh", "ij"]

    def test_non_breaking_space_kept(self):
        assert wrap_words("dit\xa0: oui", len, 40) == ["dit\xa0: oui"]

    def test_never_breaks_at_non_breaking_space(self):
        lines = wrap_words("aa bb\xa0: cc\xa0!", len, 6)
        assert lines == ["aa", "bb\xa0:", "cc\xa0!"]
        assert not any(line.startswith((":", "!")) for line in lines)

    def test_blank_text(self):
        assert wrap_words("", len, 10) == [""]
        assert wrap_words("   ", len, 10) == ["   "]


class TestReportLabMeasurer:
    def test_lines_fit_width(self):
        text = "      " + " ".join(["Lorem ipsum dolor sit amet, consectetur adipiscing elit."] * 8)
        lines = ReportLabMeasurer().split_to_width(text, "Times-Roman", 11, 75)
        assert len(lines) > 1
        for line in lines:
            assert stringWidth(line, "Times-Roman", 11) <= 75 * mm
        assert lines[0].startswith("      Lorem")

    def test_wider_font_needs_more_lines(self):
        text = " ".join(["pocket"] * 60)
        narrow = ReportLabMeasurer().split_to_width(text, "Times-Roman", 11, 75)
        wide = ReportLabMeasurer().split_to_width(text, "Courier", 11, 75)
        assert len(wide) > len(narrow)
