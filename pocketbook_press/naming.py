import re


def sanitize_filename(name: str) -> str:
    """Replace every non-alphanumeric character with '_' and lower-case."""
    return re.sub(r"[^A-Za-z0-9]", "_", name).lower()


def body_filename(title: str) -> str:
    return f"{sanitize_filename(title)}_corps.pdf"


def cover_filename(title: str) -> str:
    return f"{sanitize_filename(title)}_couverture.pdf"
