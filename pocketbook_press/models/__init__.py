"""
Data models for PocketBook Press
"""

from pocketbook_press.models.manuscript import (
    Chapter,
    Manuscript,
    ManuscriptError,
    load_manuscript,
)

__all__ = [
    "Chapter",
    "Manuscript",
    "ManuscriptError",
    "load_manuscript",
]
