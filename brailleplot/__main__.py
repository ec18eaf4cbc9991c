from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any, Sequence

from brailleplot.api import hist, plot
from brailleplot.config import PlotOptions, load_plot_options
from brailleplot.display import resolve_default_chart_size
from brailleplot.errors import ChartSizeError, PlotDataError
from brailleplot.series import SHAPE_KINDS

LOGGER = logging.getLogger("brailleplot")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="brailleplot", description="Render a Braille plot from a list of values.")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("plot", "Plot a list of numbers, or a list of up to 5 equal-length lists."),
        ("hist", "Plot a histogram of a list of numbers."),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument(
            "input",
            nargs="?",
            type=Path,
            default=None,
            help="JSON file holding the list. Default: read JSON from stdin.",
        )
        cmd.add_argument("-x", "--max-x", type=int, default=None, help="The maximum width of the plot, in dots.")
        cmd.add_argument("-y", "--max-y", type=int, default=None, help="The maximum height of the plot, in dots.")
        cmd.add_argument("-t", "--title", default=None, help="Title printed above the plot.")
        cmd.add_argument("-l", "--legend", action="store_true", default=None, help="Plot a tiny, maybe useful legend.")
        cmd.add_argument("--kind", choices=SHAPE_KINDS, default=None, help="How the samples are joined.")
        cmd.add_argument("--nice", action="store_true", default=None, help="Draw a dashed border around the plot.")
        cmd.add_argument("--y-range", type=float, nargs=2, metavar=("MIN", "MAX"), default=None)
        cmd.add_argument("--fit", action="store_true", help="Size the plot to the terminal.")
        cmd.add_argument("--config", type=Path, default=None, help="TOML file with a [plot] table.")
        if name == "hist":
            cmd.add_argument("-b", "--bins", type=int, default=None, help="Number of bins. Default: 20.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        options = _resolve_options(args)
        values = _read_values(args.input)
        if args.command == "hist":
            text = hist(values, options=options)
        else:
            text = plot(values, options=options)
    except PlotDataError as exc:
        print(f"{exc.label} {exc.msg}", file=sys.stderr)
        return 1
    except (ChartSizeError, ValueError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(text)
    return 0


def _resolve_options(args: argparse.Namespace) -> PlotOptions:
    options = load_plot_options(args.config) if args.config is not None else PlotOptions()
    max_x, max_y = args.max_x, args.max_y
    if args.fit:
        fit_x, fit_y = resolve_default_chart_size(indent=options.indent)
        max_x = max_x if max_x is not None else fit_x
        max_y = max_y if max_y is not None else fit_y
    overrides: dict[str, Any] = {
        "max_x": max_x,
        "max_y": max_y,
        "title": args.title,
        "legend": args.legend,
        "nice": args.nice,
        "y_range": tuple(args.y_range) if args.y_range is not None else None,
        "bins": getattr(args, "bins", None),
    }
    if args.kind is not None:
        overrides["hist_kind" if args.command == "hist" else "kind"] = args.kind
    return options.merged(**overrides)


def _read_values(path: Path | None) -> Any:
    raw = path.read_text(encoding="utf-8") if path is not None else sys.stdin.read()
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PlotDataError("Incorrect input type.", f"Input is not valid JSON: {exc.msg}.") from exc


if __name__ == "__main__":
    raise SystemExit(main())
