"""Command-line interface for rangegaps."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

import click
from dotenv import load_dotenv
from rich.console import Console

from rangegaps import __version__
from rangegaps.config import get_config

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="rangegaps")
@click.option("-v", "--verbose", is_flag=True, help="Show every gap in text output")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (only results)")
@click.pass_context
def main(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """rangegaps - Find the uncovered sub-ranges between known points."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


def _parse_points(tokens: list[str], source: str) -> list[int]:
    """Parse integer points, raising BadParameter on the first bad token."""
    points: list[int] = []
    for token in tokens:
        try:
            points.append(int(token))
        except ValueError:
            raise click.BadParameter(f"{token!r} is not an integer", param_hint=source) from None
    return points


def _read_points_file(input_file: TextIO) -> list[str]:
    """Read whitespace or comma separated tokens from an open file."""
    text = input_file.read()
    return [token for token in text.replace(",", " ").split() if token]


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("points", nargs=-1)
@click.option(
    "--range",
    "-r",
    "query",
    default="(-inf, +inf)",
    show_default=True,
    help="Query range in interval notation, e.g. '[0, 100)'",
)
@click.option(
    "--input",
    "-i",
    "input_file",
    type=click.File("r"),
    default=None,
    help="Read points from a file ('-' for stdin)",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json", "csv"]),
    default=None,
    help="Output format (default: from config or text)",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write JSON/CSV output to a file instead of stdout",
)
@click.option("--sort", "sort_input", is_flag=True, help="Sort points before computing gaps")
@click.option(
    "--check-order/--no-check-order",
    default=None,
    help="Reject unordered points (default: from config, on)",
)
@click.pass_context
def gaps(
    ctx: click.Context,
    points: tuple[str, ...],
    query: str,
    input_file: TextIO | None,
    format: str | None,
    output_path: Path | None,
    sort_input: bool,
    check_order: bool | None,
) -> None:
    """Find gaps between POINTS within a query range.

    Negative points can be given directly, e.g. `gaps -r "[-5, 5]" -3 2`.
    """
    from rangegaps.errors import GapsError, get_friendly_message, log_error
    from rangegaps.finder import GapFinder
    from rangegaps.notation import parse_range
    from rangegaps.output import GapReportFormatter

    verbose = ctx.obj.get("verbose", False)
    quiet = ctx.obj.get("quiet", False)
    cfg = get_config()

    # Use CLI options or config defaults
    if format is None:
        format = cfg.output.format
    if check_order is None:
        check_order = cfg.validation.check_order

    values = _parse_points(list(points), "POINTS")
    if input_file is not None:
        values.extend(_parse_points(_read_points_file(input_file), "--input"))

    try:
        bound_pair = parse_range(query)
        finder = GapFinder(check_order=check_order, sort_input=sort_input)
        report = finder.find_gaps(values, bound_pair)
    except GapsError as e:
        log_error(e, f"gaps --range {query}")
        err_console.print(f"[red]Error:[/red] {get_friendly_message(e)}")
        sys.exit(1)

    formatter = GapReportFormatter(report, max_display=cfg.output.max_display)

    if format == "text":
        if output_path is not None:
            raise click.UsageError("--output requires --format json or csv")
        if quiet:
            for gap in report.gaps:
                click.echo(gap.notation)
        else:
            formatter.to_text(verbose)
        return

    if output_path is not None:
        saved = formatter.save(output_path, format)
        if not quiet:
            console.print(f"[green]Saved {report.gap_count} gaps to[/green] {saved}")
        return

    click.echo(formatter.render(format), nl=False)


@main.command()
@click.argument("query")
def bounds(query: str) -> None:
    """Show the start and end bounds of QUERY (interval notation)."""
    from rangegaps.errors import InvalidRangeError, log_error
    from rangegaps.notation import parse_range

    try:
        start, end = parse_range(query)
    except InvalidRangeError as e:
        log_error(e, f"bounds {query}")
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    click.echo(f"start: {start!r}")
    click.echo(f"end:   {end!r}")


@main.group()
def config() -> None:
    """Manage rangegaps configuration."""
    pass


@config.command(name="show")
def config_show() -> None:
    """Show current configuration."""
    from rangegaps.config import find_config_file

    cfg = get_config()
    config_file = find_config_file()

    console.print("[bold]Current Configuration[/bold]")
    console.print()

    if config_file:
        console.print(f"[dim]Config file:[/dim] {config_file}")
    else:
        console.print("[dim]Config file:[/dim] (none - using defaults)")
    console.print()

    console.print("[bold]Validation:[/bold]")
    console.print(f"  Check order: {cfg.validation.check_order}")
    console.print()

    console.print("[bold]Output:[/bold]")
    console.print(f"  Format: {cfg.output.format}")
    console.print(f"  Max display: {cfg.output.max_display}")


@config.command(name="path")
def config_path() -> None:
    """Show configuration file paths."""
    from rangegaps.config import find_config_file, get_config_paths

    console.print("[bold]Configuration paths (in priority order):[/bold]")
    config_file = find_config_file()

    for path in get_config_paths():
        if path.exists():
            if path == config_file:
                console.print(f"  [green]{path}[/green] (active)")
            else:
                console.print(f"  {path} (exists)")
        else:
            console.print(f"  [dim]{path}[/dim]")

    console.print()
    console.print("[bold]Other paths:[/bold]")
    console.print(f"  .env file: {Path.cwd() / '.env'}")


@config.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite existing config file")
def config_init(force: bool) -> None:
    """Create a default configuration file in the current directory."""
    from rangegaps.config import CONFIG_FILE_NAME, save_default_config

    config_path = Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists() and not force:
        console.print(f"[yellow]Config file already exists:[/yellow] {config_path}")
        console.print("Use --force to overwrite.")
        sys.exit(1)

    save_default_config(config_path)
    console.print(f"[green]Created config file:[/green] {config_path}")


if __name__ == "__main__":
    main()
