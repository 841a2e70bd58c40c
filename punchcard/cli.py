"""
CLI: read timestamps on stdin, print a weekday x hour punchcard.
Usage:
  git log --format='%ad' --date=iso | punchcard --gradient fire --scale
  punchcard --margins --transparent < times.txt
  punchcard --layout '%Y-%m-%dT%H:%M:%S%z' < times.txt
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from rich.console import Console

from .config import ConfigError, config_from_dict, load_config
from .gradient import UnknownGradientError, gradient_names
from .pipeline import render_punchcard

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="punchcard",
        description="Render a weekday x hour-of-day heatmap of timestamps read from stdin.",
    )
    parser.add_argument(
        "--gradient",
        "--palette",
        dest="gradient",
        default=None,
        help="Color gradient name (default: blackwhite). Use --list-gradients to see all.",
    )
    parser.add_argument(
        "--scale",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show the color scale below the grid.",
    )
    parser.add_argument(
        "--transparent",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Leave cells with no data uncolored.",
    )
    parser.add_argument(
        "--margins",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show per-weekday and per-hour totals.",
    )
    parser.add_argument(
        "--layout",
        default=None,
        help="strptime format of each timestamp (default: '%%Y-%%m-%%d %%H:%%M:%%S %%z').",
    )
    parser.add_argument(
        "--delimiter",
        default=None,
        help="Separator between start and stop timestamps on one line (default: tab).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--list-gradients",
        action="store_true",
        help="Print the available gradient names and exit.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log ingestion details to stderr.",
    )
    return parser


def print_gradient_names(out: TextIO) -> None:
    print("Valid palettes:", file=out)
    for name in gradient_names():
        print(f"- {name}", file=out)


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    console: Console | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.list_gradients:
        print_gradient_names(stdout)
        return 0

    try:
        config = config_from_dict(load_config(args.config)).with_overrides(
            gradient=args.gradient,
            layout=args.layout,
            delimiter=args.delimiter,
            show_scale=args.scale,
            transparent_zero=args.transparent,
            show_margins=args.margins,
        )
    except (ConfigError, OSError) as e:
        logger.error("Could not load config: %s", e)
        return 1

    if console is None:
        from .renderer import make_console
        console = make_console(file=stdout)

    try:
        render_punchcard(stdin, config, console=console)
    except UnknownGradientError:
        print_gradient_names(stdout)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Reading input failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
