"""Command line front end for the shipping application."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from pengiriman import estimasi, history
from pengiriman.chart import BarChart


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pengiriman", description="Aplikasi pengiriman.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("cities", help="list the known cities")

    est = sub.add_parser("estimate", help="estimate delivery days")
    est.add_argument("origin")
    est.add_argument("destination")
    est.add_argument("--file", default=estimasi.DEFAULT_FILE)

    hist = sub.add_parser("history", help="look up a shipment by receipt code")
    hist.add_argument("code")
    hist.add_argument("--file", default=history.DEFAULT_FILE)
    hist.add_argument("--save", metavar="DIR", help="save the result to DIR/<code>.txt")

    stats = sub.add_parser("stats", help="show bar chart geometry for LABEL=VALUE pairs")
    stats.add_argument("pairs", nargs="*")
    stats.add_argument("--title", default="")
    stats.add_argument("--width", type=int, default=400)
    stats.add_argument("--height", type=int, default=300)
    return parser


def _run_estimate(args: argparse.Namespace) -> int:
    table = estimasi.load_estimates(args.file)
    try:
        table.lookup(args.origin, args.destination)
    except estimasi.EstimateError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(table.describe(args.origin, args.destination))
    return 0


def _run_history(args: argparse.Namespace) -> int:
    try:
        text = history.search(args.file, args.code)
        print(text)
        if args.save:
            path = history.save_result(args.code, text, args.save)
            print(f"Data berhasil disimpan ke file {path.name}")
    except history.HistoryError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0 if text != history.MSG_NOT_FOUND else 1


def _run_stats(args: argparse.Namespace) -> int:
    labels, values = [], []
    for pair in args.pairs:
        label, sep, value = pair.partition("=")
        try:
            if not sep:
                raise ValueError
            values.append(int(value))
        except ValueError:
            print(f"invalid pair: {pair}", file=sys.stderr)
            return 2
        labels.append(label)
    chart = BarChart(title=args.title)
    chart.set_data(labels, values)
    if chart.title:
        print(chart.title)
    try:
        bars = chart.layout(args.width, args.height)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    for bar in bars:
        print(f"{bar.label}\t{bar.value}\t{bar.left},{bar.top},{bar.right},{bar.bottom}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command given on the command line and return its exit status."""
    args = _build_parser().parse_args(argv)
    if args.command == "cities":
        print("\n".join(estimasi.CITIES))
        return 0
    if args.command == "estimate":
        return _run_estimate(args)
    if args.command == "history":
        return _run_history(args)
    return _run_stats(args)


if __name__ == "__main__":
    sys.exit(main())