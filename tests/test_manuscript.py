"""Tests for manuscript models and JSON intake."""

import json

import pytest
from pydantic import ValidationError

from pocketbook_press.models.manuscript import Manuscript, ManuscriptError, load_manuscript


def write(tmp_path, payload, name="book.json"):
    path = tmp_path / name
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


class TestLoadManuscript:
    def test_valid(self, manuscript_file):
        m = load_manuscript(manuscript_file)
        assert m.title == "Mon Livre! 2024"
        assert m.subtitle == "Nouvelles"
        assert m.author is None
        assert [c.title for c in m.chapters] == ["Start", "Middle"]

    def test_optional_fields_absent(self, tmp_path):
        m = load_manuscript(write(tmp_path, {"title": "T", "chapters": []}))
        assert m.subtitle is None
        assert m.chapters == []

    def test_missing_chapters(self, tmp_path):
        with pytest.raises(ManuscriptError, match="Required fields"):
            load_manuscript(write(tmp_path, {"title": "T"}))

    def test_missing_title(self, tmp_path):
        with pytest.raises(ManuscriptError, match="title"):
            load_manuscript(write(tmp_path, {"chapters": []}))

    def test_empty_title(self, tmp_path):
        with pytest.raises(ManuscriptError, match="title"):
            load_manuscript(write(tmp_path, {"title": "", "chapters": []}))

    def test_chapters_not_a_list(self, tmp_path):
        with pytest.raises(ManuscriptError):
            load_manuscript(write(tmp_path, {"title": "T", "chapters": "oops"}))

    def test_top_level_array(self, tmp_path):
        with pytest.raises(ManuscriptError):
            load_manuscript(write(tmp_path, [1, 2]))

    def test_malformed_json(self, tmp_path):
        with pytest.raises(ManuscriptError, match="Malformed JSON"):
            load_manuscript(write(tmp_path, "{not json"))

    def test_wrong_extension(self, tmp_path):
        with pytest.raises(ManuscriptError, match="JSON file"):
            load_manuscript(write(tmp_path, {"title": "T", "chapters": []}, name="book.txt"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManuscriptError, match="Could not read"):
            load_manuscript(tmp_path / "absent.json")


class TestManuscriptModel:
    def test_frozen(self):
        m = Manuscript(title="T", chapters=[])
        with pytest.raises(ValidationError):
            m.title = "Other"
