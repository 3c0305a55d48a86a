"""CLI entry point for the selector kit."""

import argparse
import logging
import sys

from src.core.config import Settings
from src.objects.json_codec import to_json
from src.objects.rectangle import make_rectangle
from src.pipeline.catalog import compile_catalog, export_catalog_json


def _number(text: str) -> int | float:
    """Parse an int when possible, otherwise a float."""
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Selector kit - build CSS selectors from a YAML catalog",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- build subcommand (default) ---
    build_parser = subparsers.add_parser("build", help="Compile the selector catalog")
    # Shared flags default to SUPPRESS so values given before the subcommand survive
    build_parser.add_argument(
        "--config",
        default=argparse.SUPPRESS,
        help="Path to selectors YAML file (default: config/selectors.yaml)",
    )
    build_parser.add_argument(
        "--export",
        choices=["json"],
        default=argparse.SUPPRESS,
        help="Export compiled selectors to format (json)",
    )
    build_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable verbose (DEBUG) logging",
    )

    # --- rectangle subcommand ---
    rect_parser = subparsers.add_parser("rectangle", help="Print a rectangle and its area")
    rect_parser.add_argument("--width", type=_number, required=True, help="Rectangle width")
    rect_parser.add_argument("--height", type=_number, required=True, help="Rectangle height")
    rect_parser.add_argument(
        "--export",
        choices=["json"],
        default=argparse.SUPPRESS,
        help="Print the rectangle as JSON",
    )
    rect_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable verbose (DEBUG) logging",
    )

    # --- top-level flags (defaults for every subcommand) ---
    parser.add_argument("--config", default="config/selectors.yaml", help=argparse.SUPPRESS)
    parser.add_argument("--export", choices=["json"], help=argparse.SUPPRESS)
    parser.add_argument("--verbose", "-v", action="store_true", help=argparse.SUPPRESS)

    args = parser.parse_args(argv)

    # Default to build when no subcommand given
    if args.command is None:
        args.command = "build"

    return args


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def cmd_build(args: argparse.Namespace) -> None:
    """Handle build subcommand."""
    settings = Settings.from_yaml(args.config)
    catalog = compile_catalog(settings)

    if args.export == "json":
        print(export_catalog_json(catalog))
        return

    for name, selector in catalog.items():
        print(f"{name}: {selector}")


def cmd_rectangle(args: argparse.Namespace) -> None:
    """Handle rectangle subcommand."""
    rect = make_rectangle(args.width, args.height)

    if args.export == "json":
        print(to_json(rect))
        return

    print(f"Width: {rect.width}")
    print(f"Height: {rect.height}")
    print(f"Area: {rect.area()}")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "rectangle":
        cmd_rectangle(args)
    else:
        # build (default)
        try:
            cmd_build(args)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
