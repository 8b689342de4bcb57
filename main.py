import click
from pocketbook_press.models.manuscript import load_manuscript, ManuscriptError
from pocketbook_press.renderer.body_renderer import generate_body
from pocketbook_press.cover.cover_renderer import generate_cover
from pocketbook_press.validator.book_validator import validate_book_pdf
from pocketbook_press.renderer.fonts import FONT_FAMILIES
from pocketbook_press.logging_config import setup_logger


@click.command(help="Generate print-ready pocket book PDFs (body and cover) from a JSON manuscript, or validate an existing PDF.")
@click.argument("manuscript_path", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--font", type=click.Choice(list(FONT_FAMILIES), case_sensitive=False), default="times", show_default=True, help="Font family for body and cover")
@click.option("--out-dir", "out_dir", type=str, default="outputs", show_default=True, help="Directory for the generated PDFs")
@click.option("--body/--no-body", "make_body", default=True, show_default=True, help="Generate the body PDF (<title>_corps.pdf)")
@click.option("--cover/--no-cover", "make_cover", default=True, show_default=True, help="Generate the cover PDF (<title>_couverture.pdf)")
@click.option("--author", type=str, default="", show_default=True, help="Author printed on the cover (overrides the manuscript)")
@click.option("--validate-path", "validate_path", type=str, default=None, help="If provided, validates the given PDF and exits.")
@click.option("--validate-pages", "validate_pages", type=click.IntRange(min=1), default=None, help="Exact page count expected during validation (2 for a cover).")
@click.option("--verbose", is_flag=True, default=False, help="Log layout decisions (page breaks, chapter starts)")
def main(manuscript_path: str | None, font: str, out_dir: str, make_body: bool, make_cover: bool, author: str,
         validate_path: str | None, validate_pages: int | None, verbose: bool):
    setup_logger("DEBUG" if verbose else None)

    # Validation mode
    if validate_path:
        report = validate_book_pdf(validate_path, expected_pages=validate_pages)
        click.echo(f"Validation for {validate_path} (trim={report.trim_key})")
        click.echo(f"Pages: {report.page_count}")
        click.echo(f"First page size: {report.page_size_pt[0]:.2f} x {report.page_size_pt[1]:.2f} pt")
        if not report.issues:
            click.echo("✅ No issues found.")
        else:
            for iss in report.issues:
                click.echo(f"{iss.level.upper()}: {iss.message}")
        if not report.ok:
            raise SystemExit(1)
        return

    # Generation mode
    if not manuscript_path:
        raise click.UsageError("MANUSCRIPT_PATH is required unless --validate-path is given.")

    try:
        manuscript = load_manuscript(manuscript_path)
    except ManuscriptError as e:
        click.echo(f"❌ {e}")
        raise SystemExit(1)

    if author:
        manuscript = manuscript.model_copy(update={"author": author})

    font = font.lower()
    if make_body:
        path = generate_body(manuscript, font=font, out_dir=out_dir)
        click.echo(f"✅ Generated body {path}")
    if make_cover:
        path = generate_cover(manuscript, font=font, out_dir=out_dir)
        click.echo(f"✅ Generated cover {path}")


if __name__ == "__main__":
    main()
