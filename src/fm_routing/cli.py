"""Command-line interface for inspecting and rendering the algorithms."""

from __future__ import annotations

__all__ = ["cli"]

import sys
from pathlib import Path

import click

from fm_routing.catalogue import ALGORITHM_COUNT, algorithm_label, graph_at
from fm_routing.describe import build_description
from fm_routing.layout.engine import compute_layout
from fm_routing.render.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from fm_routing.themes import THEMES
from fm_routing.validate import Severity, validate_catalogue

ALGORITHM_ARG = click.argument(
    "algorithm", type=click.IntRange(1, ALGORITHM_COUNT), metavar="ALG"
)


@click.group()
@click.version_option(package_name="fm-routing")
def cli():
    """Six-operator FM algorithm routing: describe, lay out and render."""


@cli.command("list")
def list_algorithms():
    """List every algorithm with its routing summary."""
    for index in range(ALGORITHM_COUNT):
        label = algorithm_label(index)
        click.echo(f"{label:<7} {build_description(graph_at(index))}")


@cli.command()
@ALGORITHM_ARG
def describe(algorithm: int):
    """Print the routing summary for algorithm ALG (1-32)."""
    click.echo(build_description(graph_at(algorithm - 1)))


@cli.command()
@ALGORITHM_ARG
@click.option("--width", type=float, default=DEFAULT_WIDTH, show_default=True)
@click.option("--height", type=float, default=DEFAULT_HEIGHT, show_default=True)
def layout(algorithm: int, width: float, height: float):
    """Print operator levels and positions for algorithm ALG."""
    try:
        result = compute_layout(graph_at(algorithm - 1), width, height)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    click.echo(f"{algorithm_label(algorithm - 1)}  policy: {result.policy.value}")
    for op in sorted(result.positions):
        x, y = result.positions[op]
        click.echo(f"  OP{op + 1}  level={result.levels[op]}  x={x:.1f}  y={y:.1f}")


@cli.command()
@ALGORITHM_ARG
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output SVG file (stdout when omitted).",
)
@click.option(
    "--theme",
    type=click.Choice(sorted(THEMES)),
    default="lcd",
    show_default=True,
)
@click.option("--width", type=float, default=DEFAULT_WIDTH, show_default=True)
@click.option("--height", type=float, default=DEFAULT_HEIGHT, show_default=True)
def render(algorithm: int, output: Path | None, theme: str, width: float, height: float):
    """Render algorithm ALG as an SVG display panel."""
    from fm_routing.render.svg import render_svg

    index = algorithm - 1
    try:
        svg = render_svg(
            graph_at(index),
            THEMES[theme],
            width=width,
            height=height,
            title=algorithm_label(index),
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    if output is None:
        click.echo(svg)
    else:
        output.write_text(svg, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)


@cli.command()
def check():
    """Validate every catalogue entry; exit 1 on any error."""
    report = validate_catalogue()
    has_errors = False
    for index, violations in report.items():
        for v in violations:
            click.echo(f"{algorithm_label(index)}: [{v.severity.value}] {v.message}")
            if v.severity == Severity.ERROR:
                has_errors = True
    if not report:
        click.echo(f"All {ALGORITHM_COUNT} algorithms OK")
    if has_errors:
        sys.exit(1)
