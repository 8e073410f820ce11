"""pnmisc command-line interface."""

from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Annotated

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

app = typer.Typer(
    name="pnmisc",
    help="pnmisc: quadrant counts, apply statistics and peaks for tabular data",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()


def _setup_logging(quiet: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if not quiet else logging.WARNING,
        format="%(message)s",
    )


def _fail(message: str) -> None:
    console.print(Panel(f"[red]{message}[/red]", border_style="red"))
    raise typer.Exit(1)


def _load(input_path: str, x: str, y: str, group: str | None = None):
    from pnmisc.io.loaders import load_table

    try:
        return load_table(input_path, x, y, group)
    except (OSError, ValueError) as exc:
        _fail(str(exc))


def _output_tree(output: Path, with_params: bool) -> None:
    tree = Tree(f"[bold green]{output.parent}/[/bold green]", guide_style="dim")
    tree.add(f"[cyan]{output.name}[/cyan] -- computed table")
    if with_params:
        tree.add(f"[cyan]{output.stem}_parameters.json[/cyan] -- parameters used")
    console.print()
    console.print(Panel(tree, title="Output Files", border_style="green"))


# -----------------------------------------------------------------------
# quadrants
# -----------------------------------------------------------------------
@app.command()
def quadrants(
    input_path: Annotated[str, typer.Argument(help="Path to a CSV file")],
    x: Annotated[str, typer.Option("--x", "-x", help="Column with x values")] = "x",
    y: Annotated[str, typer.Option("--y", "-y", help="Column with y values")] = "y",
    xintercept: Annotated[float, typer.Option("--xintercept", help="Origin along x")] = 0.0,
    yintercept: Annotated[float, typer.Option("--yintercept", help="Origin along y")] = 0.0,
    pool_along: Annotated[
        str, typer.Option("--pool-along", "-p", help="Pool quadrants: none, x or y")
    ] = "none",
    quadrant: Annotated[
        list[int] | None,
        typer.Option("--quadrant", "-q", help="Quadrant to report (repeatable); 0 = total"),
    ] = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Save counts to this CSV")
    ] = None,
    quiet: Annotated[bool, typer.Option("--quiet", help="Minimal output")] = False,
) -> None:
    """[bold cyan]Count[/bold cyan] observations in each quadrant.

    Points on a dividing line count on its non-negative side.

    [bold]Examples:[/bold]
        pnmisc quadrants data.csv -x logFC -y score
        pnmisc quadrants data.csv --pool-along x --yintercept 10
        pnmisc quadrants data.csv -q 0 -o counts.csv
    """
    from pnmisc.compute.quadrants import quadrant_counts
    from pnmisc.config import QuadrantConfig
    from pnmisc.io.exporters import save_parameters, save_results

    _setup_logging(quiet)

    cfg = QuadrantConfig(
        pool_along=pool_along,
        xintercept=xintercept,
        yintercept=yintercept,
        quadrants=quadrant or None,
    )
    try:
        cfg.validate()
    except ValueError as exc:
        _fail(str(exc))

    data = _load(input_path, x, y)
    try:
        counts = quadrant_counts(
            data,
            quadrants=cfg.quadrants,
            pool_along=cfg.pool_along,
            xintercept=cfg.xintercept,
            yintercept=cfg.yintercept,
            labels=cfg.labels,
        )
    except ValueError as exc:
        _fail(str(exc))

    table = Table(
        title="Quadrant Counts",
        box=box.DOUBLE_EDGE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Quadrant", style="bold")
    table.add_column("Count", justify="right", style="green")
    table.add_column("Percentage", justify="right", style="yellow")

    total = len(data)
    for row in counts.itertuples(index=False):
        name = "all" if row.quadrant == 0 else str(row.quadrant)
        pct = row.count / total * 100 if total else 0.0
        table.add_row(name, f"{row.count:,}", f"{pct:.1f}%")

    console.print(table)

    if output:
        out = Path(output)
        save_results(counts, out)
        save_parameters(asdict(cfg), out.with_name(f"{out.stem}_parameters.json"))
        _output_tree(out, with_params=True)


# -----------------------------------------------------------------------
# apply
# -----------------------------------------------------------------------
@app.command()
def apply(
    input_path: Annotated[str, typer.Argument(help="Path to a CSV file")],
    x: Annotated[str, typer.Option("--x", "-x", help="Column with x values")] = "x",
    y: Annotated[str, typer.Option("--y", "-y", help="Column with y values")] = "y",
    fun_x: Annotated[
        str | None, typer.Option("--fun-x", help="Registered function applied to x")
    ] = None,
    fun_y: Annotated[
        str | None, typer.Option("--fun-y", help="Registered function applied to y")
    ] = None,
    group_by: Annotated[
        str | None, typer.Option("--group-by", "-g", help="Apply separately per value of this column")
    ] = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Save the result to this CSV")
    ] = None,
    quiet: Annotated[bool, typer.Option("--quiet", help="Minimal output")] = False,
) -> None:
    """[bold cyan]Apply[/bold cyan] registered functions to x and/or y.

    Shorter results (e.g. [bold]diff[/bold]) are padded with NaN.

    [bold]Examples:[/bold]
        pnmisc apply data.csv --fun-y cumsum
        pnmisc apply data.csv --fun-y rescale --group-by category -o out.csv
    """
    from pnmisc.compute.apply import apply_by_group, apply_by_panel

    _setup_logging(quiet)

    if fun_x is None and fun_y is None:
        _fail("Supply --fun-x and/or --fun-y")

    data = _load(input_path, x, y, group_by)
    try:
        if group_by:
            result = apply_by_group(data, fun_x=fun_x, fun_y=fun_y)
        else:
            result = apply_by_panel(data, fun_x=fun_x, fun_y=fun_y)
    except (KeyError, ValueError) as exc:
        _fail(str(exc))

    table = Table(title="Transformed Values", box=box.ROUNDED, header_style="bold magenta")
    for col in result.columns:
        table.add_column(str(col), justify="right")
    for row in result.head(20).itertuples(index=False):
        table.add_row(*(f"{v:.4g}" if isinstance(v, float) else str(v) for v in row))
    console.print(table)
    if len(result) > 20:
        console.print(f"[dim]... {len(result) - 20:,} more rows[/dim]")

    if output:
        from pnmisc.io.exporters import save_results

        out = Path(output)
        save_results(result, out)
        _output_tree(out, with_params=False)


# -----------------------------------------------------------------------
# peaks
# -----------------------------------------------------------------------
@app.command()
def peaks(
    input_path: Annotated[str, typer.Argument(help="Path to a CSV file")],
    x: Annotated[str, typer.Option("--x", "-x", help="Column with x values")] = "x",
    y: Annotated[str, typer.Option("--y", "-y", help="Column with y values")] = "y",
    span: Annotated[int, typer.Option("--span", "-s", help="Window width (odd)")] = 5,
    ignore_threshold: Annotated[
        float, typer.Option("--ignore-threshold", help="Fraction of the y range to ignore")
    ] = 0.0,
    strict: Annotated[bool, typer.Option("--strict", help="Ignore tied maxima")] = False,
    valleys: Annotated[bool, typer.Option("--valleys", help="Find minima instead")] = False,
) -> None:
    """[bold cyan]Find[/bold cyan] peaks (or valleys) of y along x.

    [bold]Examples:[/bold]
        pnmisc peaks spectrum.csv -x wavelength -y absorbance --span 11
        pnmisc peaks spectrum.csv --valleys
    """
    from pnmisc.compute.peaks import find_peaks, find_valleys

    data = _load(input_path, x, y).sort_values("x", kind="stable").reset_index(drop=True)
    finder = find_valleys if valleys else find_peaks
    try:
        flags = finder(
            data["y"].to_numpy(), span=span, ignore_threshold=ignore_threshold, strict=strict
        )
    except ValueError as exc:
        _fail(str(exc))

    found = data[flags]
    table = Table(
        title=f"{'Valleys' if valleys else 'Peaks'} ({len(found)})",
        box=box.ROUNDED,
        header_style="bold magenta",
    )
    table.add_column(x, justify="right", style="cyan")
    table.add_column(y, justify="right", style="green")
    for row in found.itertuples(index=False):
        table.add_row(f"{row.x:g}", f"{row.y:g}")
    console.print(table)


# -----------------------------------------------------------------------
# info
# -----------------------------------------------------------------------
@app.command()
def info(
    functions: Annotated[
        bool,
        typer.Option("--functions", "-f", help="List registered apply functions"),
    ] = False,
) -> None:
    """[bold cyan]Show[/bold cyan] pnmisc version and registered functions.

    [bold]Examples:[/bold]
        pnmisc info
        pnmisc info --functions
    """
    import plotnine

    from pnmisc import __version__

    tbl = Table(box=box.ROUNDED, show_header=False)
    tbl.add_column("", style="cyan")
    tbl.add_column("")
    tbl.add_row("Version", f"[bold]{__version__}[/bold]")
    tbl.add_row("Package", "pnmisc")
    tbl.add_row("plotnine", plotnine.__version__)
    console.print(tbl)

    if functions:
        from pnmisc.compute import ApplyFunctionRegistry

        console.print()
        ftbl = Table(
            title="Registered Apply Functions",
            box=box.ROUNDED,
            header_style="bold magenta",
        )
        ftbl.add_column("Function", style="cyan bold")
        ftbl.add_column("Description", style="dim")

        for name in ApplyFunctionRegistry.list_functions():
            doc = (ApplyFunctionRegistry.get(name).__doc__ or "").strip().splitlines()
            ftbl.add_row(name, doc[0] if doc else "(user-registered)")

        console.print(ftbl)

        console.print()
        console.print(
            Panel(
                "[dim]Register custom functions with:[/dim]\n\n"
                "[bold]from pnmisc import register_apply_function[/bold]\n\n"
                "[bold]@register_apply_function('my_function')[/bold]\n"
                "def my_function(values, **kwargs):\n"
                "    ...",
                title="Custom Functions",
                border_style="blue",
            )
        )


if __name__ == "__main__":
    app()
