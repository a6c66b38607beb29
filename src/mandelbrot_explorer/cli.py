"""Command-line options layered over ExplorerConfig."""
import argparse
from pathlib import Path

from mandelbrot_explorer.config import ExplorerConfig

OVERRIDABLE = ("width", "height", "iterations", "workers")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mandelbrot-explorer",
        description="Interactive Mandelbrot set explorer.",
    )
    parser.add_argument("--config", type=Path, help="JSON file with explorer settings")
    parser.add_argument("--width", type=int, help="initial window width in pixels")
    parser.add_argument("--height", type=int, help="initial window height in pixels")
    parser.add_argument("--iterations", type=int, help="initial iteration budget")
    parser.add_argument("--workers", type=int, help="render threads (default: CPU count)")
    parser.add_argument("--log-file", type=str, help="also write the log to this file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def load_config(args: argparse.Namespace) -> ExplorerConfig:
    """File settings first, then any flags given on the command line."""
    base = ExplorerConfig.from_file(args.config) if args.config else ExplorerConfig()
    overrides = {
        name: getattr(args, name)
        for name in OVERRIDABLE
        if getattr(args, name) is not None
    }
    return ExplorerConfig.model_validate({**base.model_dump(), **overrides})
