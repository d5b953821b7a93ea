"""CLI for inspecting symbol files."""

import click
from pathlib import Path
from rich.console import Console
from rich.markup import escape
from rich.table import Table
import sys

from rsymbols.config import load_config, RSymbolsConfig
from rsymbols.exporters import JSONExporter, CSVExporter
from rsymbols.ir import SymbolTable
from rsymbols.loader import SymbolLoader, LoadError
from rsymbols.reporting import ConsoleReporter

console = Console()


def _load_table(ctx: click.Context, symbol_file: str) -> SymbolTable:
    """Load a symbol file, exiting with status 1 on failure."""
    cfg: RSymbolsConfig = ctx.obj
    loader = SymbolLoader(
        Path(symbol_file),
        reporter=ConsoleReporter(Console(stderr=True)),
        encoding=cfg.encoding
    )
    try:
        loader.load()
    except LoadError:
        # Already reported by the loader
        sys.exit(1)
    return loader.get_table()


def _truncate(value: str, width: int) -> str:
    if len(value) <= width:
        return value
    return value[:width - 3] + "..."


@click.group()
@click.option("--config", default=None, help="Path to configuration file")
@click.pass_context
def main(ctx: click.Context, config: str) -> None:
    """Resource symbol table tools.

    Reads symbol files made of "<type> <class> <name> <value>" lines.
    """
    ctx.obj = load_config(config)


@main.command()
@click.argument("symbol_file", type=click.Path(dir_okay=False))
@click.option("--class", "class_name", default=None, help="Only show symbols of this class")
@click.pass_context
def show(ctx: click.Context, symbol_file: str, class_name: str) -> None:
    """Display the symbols of a file."""
    cfg: RSymbolsConfig = ctx.obj
    symbol_table = _load_table(ctx, symbol_file)

    if class_name and class_name not in symbol_table.rows():
        console.print(f"[yellow]No symbols of class {escape(class_name)}[/yellow]")
        sys.exit(1)

    classes = [class_name] if class_name else sorted(symbol_table.rows())

    table = Table(title=f"Symbols in {escape(symbol_file)}")
    table.add_column("Class", style="cyan")
    table.add_column("Name", style="green")
    if cfg.display.show_types:
        table.add_column("Type")
    table.add_column("Value", style="magenta")

    shown = 0
    for cls in classes:
        for name, entry in sorted(symbol_table.entries_for(cls).items()):
            row = [escape(cls), escape(name)]
            if cfg.display.show_types:
                row.append(escape(entry.type))
            row.append(escape(_truncate(entry.value, cfg.display.max_value_width)))
            table.add_row(*row)
            shown += 1

    console.print(table)

    console.print(f"[dim]{shown} symbols in {len(classes)} classes[/dim]")


@main.command()
@click.argument("symbol_file", type=click.Path(dir_okay=False))
@click.argument("class_name")
@click.argument("name")
@click.pass_context
def lookup(ctx: click.Context, symbol_file: str, class_name: str, name: str) -> None:
    """Print the value of one symbol."""
    symbol_table = _load_table(ctx, symbol_file)

    entry = symbol_table.lookup(class_name, name)
    if entry is None:
        console.print(f"[yellow]No symbol {escape(class_name)}.{escape(name)}[/yellow]")
        sys.exit(1)

    click.echo(entry.value)


@main.command()
@click.argument("symbol_file", type=click.Path(dir_okay=False))
@click.option("--out", default=None, help="Output directory")
@click.option(
    "--format", "formats", multiple=True, type=click.Choice(["json", "csv"]),
    help="Export format (repeatable); defaults to the configured formats"
)
@click.pass_context
def export(ctx: click.Context, symbol_file: str, out: str, formats: tuple) -> None:
    """Export the symbols of a file to JSON and/or CSV."""
    cfg: RSymbolsConfig = ctx.obj
    symbol_table = _load_table(ctx, symbol_file)

    output_dir = Path(out or cfg.output_dir)
    stem = Path(symbol_file).stem

    if not formats:
        formats = tuple(
            fmt for fmt, enabled in (("json", cfg.export.json_export), ("csv", cfg.export.csv))
            if enabled
        )

    if not formats:
        console.print("[yellow]No export format selected; use --format or enable one in the config[/yellow]")
        sys.exit(1)

    if "json" in formats:
        json_path = output_dir / f"{stem}.json"
        JSONExporter().export(symbol_table, json_path)
        console.print(f"✓ Exported symbols to {escape(str(json_path))}")

    if "csv" in formats:
        csv_path = output_dir / f"{stem}.csv"
        CSVExporter().export(symbol_table, csv_path)
        console.print(f"✓ Exported symbols to {escape(str(csv_path))}")


if __name__ == "__main__":
    main()
