"""
Manuscript data models

Defines the book structure read from a JSON manuscript and the intake
validation that runs before any layout.
"""

import json
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError


class ManuscriptError(Exception):
    """Raised when a manuscript file cannot be read or has the wrong shape."""


class Chapter(BaseModel):
    """Single chapter: heading text and raw body text"""
    title: str = Field(..., description="Chapter title, without its number")
    content: str = Field(
        ...,
        description="Body text; blank lines separate paragraphs, single newlines are soft wraps"
    )

    class Config:
        frozen = True


class Manuscript(BaseModel):
    """Complete book manuscript"""
    title: str = Field(..., description="Book title")
    subtitle: Optional[str] = Field(None, description="Optional subtitle")
    chapters: List[Chapter] = Field(..., description="Chapters in reading order")
    author: Optional[str] = Field(None, description="Author printed on the cover")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "title": "Mon Livre",
                "subtitle": "Un roman de poche",
                "author": "Jeanne Martin",
                "chapters": [
                    {
                        "title": "Le départ",
                        "content": "Il faisait beau ce matin-là.\n\nLe train partait à huit heures."
                    }
                ]
            }
        }


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "manuscript"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def load_manuscript(path: Union[str, Path]) -> Manuscript:
    """
    Read and validate a JSON manuscript.

    Args:
        path: Path to a .json file with title, chapters[] and optional subtitle/author

    Returns:
        Validated Manuscript

    Raises:
        ManuscriptError: wrong file type, unreadable file, malformed JSON or missing fields
    """
    path = Path(path)
    if path.suffix.lower() != ".json":
        raise ManuscriptError(f"Manuscript must be a JSON file, got '{path.name}'")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManuscriptError(f"Could not read manuscript '{path}': {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ManuscriptError(f"Malformed JSON in '{path.name}': {e}") from e

    if not isinstance(data, dict):
        raise ManuscriptError("Invalid manuscript structure. Required fields: title, chapters[]")

    try:
        manuscript = Manuscript.model_validate(data)
    except ValidationError as e:
        raise ManuscriptError(
            f"Invalid manuscript structure. Required fields: title, chapters[] ({_describe(e)})"
        ) from e

    # An empty title counts as missing at intake; the layout itself tolerates it
    if not manuscript.title:
        raise ManuscriptError("Invalid manuscript structure. Required fields: title, chapters[] (title: empty)")
    return manuscript
