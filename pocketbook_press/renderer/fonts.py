# Font families offered for the book, mapped to the standard PDF base fonts
# so no font files need to be embedded.

FONT_FAMILIES = {
    "times": {
        "normal": "Times-Roman",
        "bold": "Times-Bold",
        "italic": "Times-Italic",
    },
    "helvetica": {
        "normal": "Helvetica",
        "bold": "Helvetica-Bold",
        "italic": "Helvetica-Oblique",
    },
    "courier": {
        "normal": "Courier",
        "bold": "Courier-Bold",
        "italic": "Courier-Oblique",
    },
}

FONT_STYLES = ("normal", "bold", "italic")


def resolve_font(family: str, style: str = "normal") -> str:
    family_key = family.lower()
    if family_key not in FONT_FAMILIES:
        raise ValueError(f"Unknown font family '{family}'. Use one of: {', '.join(FONT_FAMILIES)}")
    styles = FONT_FAMILIES[family_key]
    if style not in styles:
        raise ValueError(f"Unknown font style '{style}'. Use one of: {', '.join(FONT_STYLES)}")
    return styles[style]
