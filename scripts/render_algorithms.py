#!/usr/bin/env python3
"""Batch render all 32 algorithms to SVG and PNG.

Outputs go to /tmp/fm_routing_renders/.

Usage:
    python scripts/render_algorithms.py [--theme light]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from fm_routing.catalogue import ALGORITHM_COUNT, algorithm_label, graph_at  # noqa: E402
from fm_routing.render.svg import render_svg  # noqa: E402
from fm_routing.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/fm_routing_renders")


def render_algorithm(
    index: int,
    output_dir: Path,
    *,
    theme_name: str = "lcd",
    width: float = 320,
    height: float = 240,
) -> tuple[str, list[str]]:
    """Render one algorithm to SVG (and optionally PNG).

    Returns (name, list_of_issues).
    """
    name = f"alg{index + 1:02d}_{theme_name}"
    issues: list[str] = []

    try:
        svg_str = render_svg(
            graph_at(index),
            THEMES[theme_name],
            width=width,
            height=height,
            title=algorithm_label(index),
        )
    except Exception as e:
        return name, [f"RENDER ERROR: {e}"]

    svg_path = output_dir / f"{name}.svg"
    svg_path.write_text(svg_str, encoding="utf-8")

    # Try PNG conversion via cairosvg (optional)
    try:
        import cairosvg

        png_path = output_dir / f"{name}.png"
        cairosvg.svg2png(bytestring=svg_str.encode(), write_to=str(png_path), scale=2)
    except ImportError:
        issues.append("cairosvg not available, skipping PNG")
    except Exception as e:
        issues.append(f"PNG conversion error: {e}")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render all FM algorithms")
    parser.add_argument("--theme", choices=sorted(THEMES), default="lcd")
    parser.add_argument("--width", type=float, default=320)
    parser.add_argument("--height", type=float, default=240)
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    print(f"Rendering {ALGORITHM_COUNT} algorithms to {OUTPUT_DIR}/")
    print()

    any_errors = False
    for index in range(ALGORITHM_COUNT):
        name, issues = render_algorithm(
            index, OUTPUT_DIR, theme_name=args.theme,
            width=args.width, height=args.height,
        )
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<12}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
