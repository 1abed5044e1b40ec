"""Command-line entry point: list manifests and render datasets to HTML."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from particlechart import settings
from particlechart.core import CoreError, ViewConfig
from particlechart.io.manifest import load_manifest, manifest_path_for
from particlechart.render import HtmlFileSurface
from particlechart.session import ChartSession


def _default_active(value: str) -> Optional[int]:
    if value.lower() == "all":
        return None
    try:
        n = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer or 'all', got {value!r}") from e
    if n < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return n


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from e
    if n < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return n


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="particlechart",
        description="Render particle-counter CSV exports as interactive charts",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="List the datasets in a manifest")
    list_parser.add_argument("manifest", nargs="?", default=None, help="Manifest JSON (path or URL)")
    list_parser.add_argument(
        "--cohort", choices=settings.COHORTS, default=None, help="Use the cohort manifest under --root"
    )
    list_parser.add_argument("--root", default=".", help="Data root (path or URL) for --cohort")

    render_parser = sub.add_parser("render", help="Render one dataset to an HTML file")
    render_parser.add_argument("source", help="CSV file (path or URL)")
    render_parser.add_argument("-o", "--output", type=Path, required=True, help="HTML file to write")
    render_parser.add_argument("--title", default=None, help="Chart title")
    render_parser.add_argument("--scale", choices=["linear", "log"], default="linear")
    render_parser.add_argument("--decimate", type=_positive_int, default=1, help="Keep every Nth point")
    render_parser.add_argument("--smooth", type=_positive_int, default=1, help="Moving-average window")
    render_parser.add_argument("--start", default=None, help="Inclusive start (ISO date/time)")
    render_parser.add_argument("--end", default=None, help="Inclusive end (ISO date/time)")
    render_parser.add_argument(
        "--last-days", type=float, default=None, help="Only the last N days of data"
    )
    render_parser.add_argument(
        "--series", nargs="+", default=None, help="Series to show (default: first few)"
    )
    render_parser.add_argument(
        "--default-active",
        type=_default_active,
        default=settings.DEFAULT_ACTIVE_COUNT,
        help="How many series start switched on (integer or 'all')",
    )
    return parser.parse_args(argv)


def _cmd_list(args: argparse.Namespace) -> int:
    source = args.manifest
    if source is None:
        source = manifest_path_for(args.cohort or settings.COHORTS[0], args.root)
    manifest = load_manifest(source)
    for title, path in manifest.pairs():
        print(f"{title}\t{path}")
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    view = ViewConfig(
        scale=args.scale,
        decimate_step=args.decimate,
        smooth_window=args.smooth,
    ).with_range(args.start, args.end)

    session = ChartSession(
        HtmlFileSurface(args.output),
        view=view,
        default_active=args.default_active,
    )
    session.load(args.source, title=args.title, raise_errors=True)

    if args.last_days is not None:
        session.quick_range(args.last_days)
    if args.series:
        session.selection = session.selection.select_none()
        for name in args.series:
            session.selection = session.selection.set_active(name, True)
        session.on_parameters_changed()

    print(f"{len(session.traces)} series written to {args.output}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format="%(asctime)s | %(levelname)-8s | %(name)s - %(message)s",
    )
    try:
        if args.command == "list":
            return _cmd_list(args)
        return _cmd_render(args)
    except CoreError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
