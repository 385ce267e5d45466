"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pgnboard.errors import PgnError
from pgnboard.game.record import GameRecord
from pgnboard.reader import load_pgn_file

_LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgnboard",
        description="Replay a PGN game and print the board position.",
    )
    parser.add_argument("file", help="Path to a UTF-8 PGN file holding one game.")
    parser.add_argument(
        "--ply",
        help="History index to print: 0 is the starting position, negative "
        "values count from the end. Defaults to the final position.",
        type=int,
        default=None,
    )
    parser.add_argument(
        "--headers",
        help="Print the game's header key/value pairs.",
        action="store_true",
    )
    parser.add_argument(
        "--verbose",
        help="Log each pipeline stage and resolved half-move.",
        action="store_true",
    )
    return parser


def _render(record: GameRecord, ply: int | None, show_headers: bool) -> str:
    lines: list[str] = []
    if show_headers:
        lines.extend(f'{key} "{value}"' for key, value in record.header.items())
        lines.append("")
    index = record.ply_count if ply is None else ply
    if index < 0:
        index += len(record.history)
    lines.append(repr(record.snapshot(index)))
    lines.append("")
    lines.append(f"Result: {record.result}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        record = load_pgn_file(args.file)
        output = _render(record, args.ply, args.headers)
    except (PgnError, OSError, IndexError) as exc:
        _LOGGER.debug("Failed to read %s", args.file, exc_info=True)
        print(f"pgnboard: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
