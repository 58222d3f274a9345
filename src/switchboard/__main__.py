"""CLI entrypoint for switchboard."""

from __future__ import annotations

import argparse
from importlib import metadata
import json
from pathlib import Path
from typing import Sequence

from .facade import Facade


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="switchboard", description="In-process notification engine"
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a config.toml (defaults to ~/.config/switchboard/config.toml)",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Bootstrap an engine from the config and print its effective settings as JSON",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Handle CLI flags; print help when none are given."""

    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.version:
        try:
            version = metadata.version("switchboard-mvc")
        except metadata.PackageNotFoundError:
            version = "0.0.0"
        print(f"switchboard {version}")
        return

    if args.show_config:
        facade = Facade.from_config(args.config)
        print(json.dumps(facade.config.model_dump(), indent=2, sort_keys=True))
        return

    parser.print_help()


if __name__ == "__main__":
    main()
