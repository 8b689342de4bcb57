# Trim sizes in millimetres. Coordinates are measured from the top-left
# corner of the page, y grows downward.

from dataclasses import dataclass

SIZES = {
    # Pocket book 110mm x 180mm
    "pocket": {
        "width": 110.0,
        "height": 180.0,
        "margin": {
            "top": 20.0,
            "bottom": 20.0,
            "inner": 20.0,  # gutter, binding side
            "outer": 15.0,
        },
    },
}


@dataclass(frozen=True)
class PageGeometry:
    width: float
    height: float
    top: float
    bottom: float
    outer: float
    inner: float

    @property
    def content_width(self) -> float:
        return self.width - self.outer - self.inner

    @property
    def content_bottom(self) -> float:
        """Lowest baseline allowed for body text."""
        return self.height - self.bottom

    def margin_left_for(self, page_number: int) -> float:
        """Left offset of the text block on a 1-based page (mirror margins)."""
        if page_number < 1:
            raise ValueError(f"Page numbers start at 1, got {page_number}")
        is_odd = (page_number % 2) == 1  # page 1 is odd (recto/right)
        if is_odd:
            # Odd pages: binding on the left (inner margin at left)
            return self.inner
        # Even pages: binding on the right (outer margin at left)
        return self.outer


def geometry_for(trim_key: str) -> PageGeometry:
    if trim_key not in SIZES:
        raise ValueError(f"Unknown trim key '{trim_key}'. Available: {list(SIZES.keys())}")

    conf = SIZES[trim_key]
    m = conf["margin"]
    return PageGeometry(
        width=float(conf["width"]),
        height=float(conf["height"]),
        top=float(m["top"]),
        bottom=float(m["bottom"]),
        outer=float(m["outer"]),
        inner=float(m["inner"]),
    )
