#!/usr/bin/env python3
"""
Command line entry point for chuk-tab.

Subcommands:
- new: print the JSON of a fresh section
- render: render a section JSON file as a tab diagram
- tunings: list available tunings
"""

import argparse
import logging
import sys
from pathlib import Path

from chuk_tab.constants import DEFAULT_BPM, DEFAULT_SECTION_NAME, DEFAULT_TUNING_NAME
from chuk_tab.errors import TabError
from chuk_tab.models.section import Section
from chuk_tab.serialization import dumps, loads
from chuk_tab.tunings import TuningLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """Argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog="chuk-tab", description="Tablature section tools")
    parser.add_argument(
        "--tunings-dir",
        type=Path,
        default=None,
        help="Directory with project tuning YAML files",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    new = subparsers.add_parser("new", help="Print the JSON of a new section")
    new.add_argument("--tuning", default=DEFAULT_TUNING_NAME, help="Tuning name")
    new.add_argument("--name", default=DEFAULT_SECTION_NAME, help="Section name")
    new.add_argument("--bpm", type=float, default=float(DEFAULT_BPM), help="Tempo in BPM")
    new.add_argument("--columns", type=positive_int, default=1, help="Number of empty columns")

    render = subparsers.add_parser("render", help="Render a section JSON file as text")
    render.add_argument("file", type=Path, help="Section JSON file")
    render.add_argument("--tuning", default=DEFAULT_TUNING_NAME, help="Tuning name")

    subparsers.add_parser("tunings", help="List available tunings")

    return parser


def new_section(
    tuning_name: str, name: str, bpm: int | float, columns: int, loader: TuningLoader
) -> str:
    """Create a section with the given number of empty columns and return its JSON."""
    section = Section.create(loader.get_notes(tuning_name)).update_name(name)
    if float(bpm).is_integer():
        bpm = int(bpm)
    section = section.set_bpm(bpm)
    for _ in range(columns - 1):
        section = section.add_column(len(section.columns) - 1)
    return dumps(section, indent=2)


def render_file(path: Path, tuning_name: str, loader: TuningLoader) -> str:
    """Render a section JSON file as a tab diagram."""
    section = loads(path.read_text(), loader.get_notes(tuning_name))
    logger.debug("Rendering %r with %d columns", section.name, len(section.columns))
    return section.to_text()


def list_tunings(loader: TuningLoader) -> str:
    """One line per tuning: name, notes, description."""
    return "\n".join(
        f"{tuning.name:<12} {' '.join(tuning.notes):<24} {tuning.description}".rstrip()
        for tuning in loader.list_tunings()
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    loader = TuningLoader(project_path=args.tunings_dir)

    try:
        if args.command == "new":
            output = new_section(args.tuning, args.name, args.bpm, args.columns, loader)
        elif args.command == "render":
            output = render_file(args.file, args.tuning, loader)
        else:
            output = list_tunings(loader)
    except (TabError, LookupError, OSError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
