"""Command-line entry point for Coral Tracker."""

from __future__ import annotations

import argparse
from pathlib import Path

from coraltrack import __version__
from coraltrack.app import CoralTrackerApp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coraltrack",
        description="Track collectibles, NPC hearts and temple offerings.",
    )
    parser.add_argument("--data", type=Path, help="YAML tracker data file for the save slot")
    parser.add_argument("--state", type=Path, help="YAML file for remembered UI state")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    CoralTrackerApp(data_path=args.data, state_path=args.state).run()


if __name__ == "__main__":
    main()
