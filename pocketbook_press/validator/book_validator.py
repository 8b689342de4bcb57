from dataclasses import dataclass
from typing import List, Optional, Tuple

from pypdf import PdfReader
from reportlab.lib.units import mm

from pocketbook_press.config.sizes import geometry_for


@dataclass
class ValidationIssue:
    level: str  # "error" | "warning" | "info"
    message: str


@dataclass
class ValidationReport:
    ok: bool
    trim_key: str
    page_count: int
    page_size_pt: Tuple[float, float]
    issues: List[ValidationIssue]


def _almost_equal(a: float, b: float, tol: float = 0.5) -> bool:
    return abs(a - b) <= tol


def validate_book_pdf(pdf_path: str, trim_key: str = "pocket", expected_pages: Optional[int] = None) -> ValidationReport:
    """
    Check a generated body or cover PDF against the trim size.

    Args:
        pdf_path: PDF to inspect
        trim_key: Key into SIZES
        expected_pages: Exact page count required (2 for a cover), or None

    Raises:
        ValueError: unknown trim key
    """
    geometry = geometry_for(trim_key)
    target_w = geometry.width * mm
    target_h = geometry.height * mm

    issues: List[ValidationIssue] = []
    reader = PdfReader(pdf_path)

    if reader.is_encrypted:
        issues.append(ValidationIssue("error", "PDF is encrypted. Printers require unencrypted PDFs."))

    num_pages = len(reader.pages)
    if num_pages == 0:
        issues.append(ValidationIssue("error", "PDF has no pages."))
    if expected_pages is not None and num_pages != expected_pages:
        issues.append(ValidationIssue("error", f"Expected {expected_pages} page(s), found {num_pages}."))

    first_size = (0.0, 0.0)
    for page_index, page in enumerate(reader.pages):
        w = float(page.mediabox.width)
        h = float(page.mediabox.height)
        if page_index == 0:
            first_size = (w, h)
        if not (_almost_equal(w, target_w) and _almost_equal(h, target_h)):
            issues.append(ValidationIssue(
                "error",
                f"Page {page_index + 1} is {w:.2f}x{h:.2f} pt, expected {target_w:.2f}x{target_h:.2f} pt ({trim_key})."
            ))

    ok = not any(i.level == "error" for i in issues)
    return ValidationReport(
        ok=ok,
        trim_key=trim_key,
        page_count=num_pages,
        page_size_pt=first_size,
        issues=issues,
    )
