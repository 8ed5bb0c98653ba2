"""CLI entry point for tfind — I/O boundary only."""

from __future__ import annotations

import contextlib
import sys
from collections.abc import Sequence
from typing import TextIO

from treefind import TreefindError
from treefind.config import USAGE, WalkConfig, parse_args
from treefind.walker import Walker


def build_walker(config: WalkConfig, out: TextIO | None = None) -> Walker:
    """Create the walker described by *config*."""
    return Walker(file_filter=config.filter, exec_path=config.exec_path, out=out)


def run_tfind(argv: Sequence[str], out: TextIO | None = None) -> int:
    """Parse *argv*, walk the tree and print matches.

    All argument errors surface before any directory is opened.

    Args:
        argv: Command-line arguments without program name.
        out: Stream for matched paths and usage. Defaults to ``sys.stdout``.

    Returns:
        int: Number of matched files.

    Raises:
        TreefindError: On malformed or unknown flags.
    """
    stream = out or sys.stdout
    if not argv:
        stream.write(USAGE + "\n")
        return 0

    config = parse_args(argv)
    walker = build_walker(config, out=stream)
    return walker.walk(config.root)


def main(argv: Sequence[str] | None = None) -> None:
    """Run the CLI entry point with process arguments.

    Exits with code 1 on user-facing errors, 0 otherwise. Unreadable
    directories and failed ``-exec`` runs are reported but do not change
    the exit status.
    """
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        run_tfind(args)
        sys.stdout.flush()
    except TreefindError as exc:
        sys.stderr.write(f"tfind: {exc}\n")
        sys.exit(1)
    except BrokenPipeError:
        with contextlib.suppress(Exception):
            sys.stdout.close()


if __name__ == "__main__":  # pragma: no cover
    main()
