"""Command-line launcher for the editor TUI."""

import argparse
import logging

from eel.config import DEFAULT_FOCUS_DELAY, DEFAULT_ROOT, EditorConfig


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(prog="eel", description="Block-based text editor")
    parser.add_argument("--root", default=DEFAULT_ROOT, help=f"Id of the editor mount surface (default: {DEFAULT_ROOT})")
    parser.add_argument(
        "--focus-delay",
        type=float,
        default=DEFAULT_FOCUS_DELAY,
        help=f"Seconds to wait before moving focus (default: {DEFAULT_FOCUS_DELAY})",
    )
    parser.add_argument("--log-file", help="Write logs to this file (the TUI owns the terminal)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log block operations (requires --log-file)")
    return parser


def configure_logging(log_file: str | None, verbose: bool) -> None:
    """Send logs to ``log_file`` if given. Without one, logging stays off."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        level=logging.DEBUG if verbose else logging.INFO,
    )


def config_from_args(args: argparse.Namespace) -> EditorConfig:
    return EditorConfig(root=args.root, focus_delay=args.focus_delay)
