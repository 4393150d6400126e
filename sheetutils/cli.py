"""Command-line interface for sheetutils."""
import click
import re
import sys
from datetime import date
from rich.console import Console
from rich.table import Table

from . import __version__
from .cells import normalize as normalize_value, are_equal, detect_type
from .models import CellValueType, InvalidArgumentError
from .utils.logger import setup_logger
from .utils.date_parser import is_iso_date_string, is_ddmmyyyy, parse_date
from .utils.timestamp import get_timestamp
from .utils.slug import to_slug
from .utils.hashing import hash_from_string

console = Console()
logger = setup_logger()

CELL_TYPES = [member.value for member in CellValueType]

# Only plain decimal literals are read as numbers
INTEGER_LITERAL = re.compile(r'[+-]?[0-9]+')
DECIMAL_LITERAL = re.compile(r'[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+)')


def _describe(value) -> str:
    """Render a normalized value with its Python type."""
    if value is None:
        return "[dim]None[/dim] (not representable)"
    if isinstance(value, date):
        return f"{value.isoformat()} ({type(value).__name__})"
    return f"{value!r} ({type(value).__name__})"


def _coerce_cli_value(text: str):
    """
    Read a command-line argument as a raw cell value.

    Plain decimal numbers become int/float and true/false become bool.
    Everything else, including '1_000', '1e3' and 'nan', stays text. Use --raw on the commands to keep the text as-is.
    """
    stripped = text.strip()
    if stripped.lower() in ('true', 'false'):
        return stripped.lower() == 'true'
    if INTEGER_LITERAL.fullmatch(stripped):
        return int(stripped)
    if DECIMAL_LITERAL.fullmatch(stripped):
        return float(stripped)
    return text


@click.group()
@click.version_option(version=__version__)
def cli():
    """sheetutils - Normalize, compare and format spreadsheet cell values."""
    pass


@cli.command()
@click.argument('cell_type', type=click.Choice(CELL_TYPES))
@click.argument('value')
@click.option('--raw', is_flag=True, help='Treat VALUE as text instead of guessing its type')
def normalize(cell_type, value, raw):
    """
    Normalize VALUE as CELL_TYPE.

    Example: sheetutils normalize float "1.234,56"
    """
    raw_value = value if raw else _coerce_cli_value(value)
    result = normalize_value(cell_type, raw_value)
    console.print(f"[cyan]{cell_type}[/cyan]: {_describe(result)}")


@cli.command()
@click.argument('a')
@click.argument('b')
@click.option('--type', '-t', 'cell_type', type=click.Choice(CELL_TYPES), help='Compare as this type')
@click.option('--raw', is_flag=True, help='Treat A and B as text instead of guessing their types')
def compare(a, b, cell_type, raw):
    """Compare values A and B after normalization."""
    value_a = a if raw else _coerce_cli_value(a)
    value_b = b if raw else _coerce_cli_value(b)

    try:
        result = are_equal(value_a, value_b, cell_type)
    except InvalidArgumentError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    table = Table(title="Comparison")
    table.add_column("Value", style="cyan")
    table.add_column("Detected type")
    for value in (value_a, value_b):
        detected = detect_type(value)
        table.add_row(repr(value), detected.value if detected else "-")
    console.print(table)

    if result is None:
        console.print("[yellow]Comparison undefined[/yellow]")
        sys.exit(2)

    console.print("[green]✓ Equal[/green]" if result else "[red]✗ Not equal[/red]")


@cli.command()
@click.option('--format', '-f', 'fmt', default=None, help="Placeholder format (default 'YYYYMMDD HHmmss')")
@click.option('--locale', '-l', default=None, help='Locale for month names (en-us, es, es-uy)')
def timestamp(fmt, locale):
    """Print the current timestamp."""
    try:
        console.print(get_timestamp(fmt, locale))
    except InvalidArgumentError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@cli.command()
@click.argument('text')
def slug(text):
    """Convert TEXT into a slug."""
    console.print(to_slug(text))


@cli.command(name='hash')
@click.argument('text')
def hash_command(text):
    """Print the base64 SHA-256 hash of TEXT."""
    try:
        console.print(hash_from_string(text))
    except InvalidArgumentError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@cli.command(name='check-date')
@click.argument('value')
def check_date(value):
    """Check whether VALUE is an ISO-8601 or dd/mm/yyyy date."""
    table = Table(title=f"Date check: {value}")
    table.add_column("Check", style="cyan")
    table.add_column("Result")

    table.add_row("ISO-8601", "✓" if is_iso_date_string(value) else "✗")
    table.add_row("dd/mm/yyyy", "✓" if is_ddmmyyyy(value) else "✗")

    parsed = parse_date(value)
    table.add_row("Parsed", parsed.isoformat() if parsed else "-")
    console.print(table)

    if parsed is None:
        sys.exit(1)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
