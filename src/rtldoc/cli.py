"""rtldoc CLI."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from rtldoc.compose import DOCUMENT_KINDS
from rtldoc.config import set_default_font, settings
from rtldoc.errors import RtlDocError
from rtldoc.models import DocumentAttributes
from rtldoc.rtl import localize as localize_text

app = typer.Typer(
    name="rtldoc",
    help="Right-to-left receipts, invoices and statements for Arabic",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, help="Logging level"),
) -> None:
    """Configure logging for every command."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        console.print(f"[red]Unknown log level:[/red] {escape(log_level)}")
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@app.command()
def render(
    attributes_path: Path = typer.Argument(..., help="JSON file with document attributes"),
    kind: str = typer.Option("invoice", help=f"Document kind: {', '.join(DOCUMENT_KINDS)}"),
    output: Path = typer.Option(Path("document.pdf"), "--output", "-o", help="Output PDF path"),
    font_normal: Optional[Path] = typer.Option(None, help="Regular font file"),
    font_bold: Optional[Path] = typer.Option(None, help="Bold font file"),
) -> None:
    """Compose a PDF document from a JSON attribute file."""
    document_class = DOCUMENT_KINDS.get(kind)
    if document_class is None:
        console.print(f"[red]Unknown document kind:[/red] {escape(kind)}")
        raise typer.Exit(code=1)

    console.print(f"[bold blue]Rendering {kind}:[/bold blue] {attributes_path}")
    try:
        if font_normal is not None:
            set_default_font({"normal": font_normal, "bold": font_bold or font_normal})
        attributes = DocumentAttributes.from_json_file(attributes_path)
        document = document_class(attributes)
        document.render_file(output)
    except RtlDocError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    console.print(f"[green]Wrote[/green] {output}")


@app.command()
def localize(
    text: str = typer.Argument(..., help="Markup fragment in logical order"),
) -> None:
    """Print the visual-order form of a markup fragment."""
    try:
        console.print(localize_text(text), markup=False, highlight=False)
    except RtlDocError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
