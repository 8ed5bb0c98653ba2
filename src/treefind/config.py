"""Command-line parsing: one pass over the find-style flag vocabulary."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Final

from treefind import TreefindError
from treefind.filter import FileFilter, SizeComparison

USAGE: Final[str] = (
    "Usage: tfind <path> [-inum num] [-name name] [-size [-=+]size] "
    "[-nlinks num] [-exec path]"
)

# Largest value an unsigned 64-bit stat field can hold.
MAX_COUNT: Final[int] = 2**64 - 1

# Flags that take exactly one value token.
FLAGS: Final[tuple[str, ...]] = ("-inum", "-name", "-size", "-nlinks", "-exec")

_SIGNS: Final[dict[str, SizeComparison]] = {
    "-": SizeComparison.LESS,
    "=": SizeComparison.EQUAL,
    "+": SizeComparison.GREATER,
}


@dataclass(frozen=True, slots=True)
class WalkConfig:
    """Everything the walker needs, built once from the command line.

    Attributes:
        root: Directory the walk starts from.
        filter: Predicates applied to every regular file.
        exec_path: Program run once per match, or ``None``.
    """

    root: str
    filter: FileFilter = field(default_factory=FileFilter)
    exec_path: str | None = None


def parse_count(flag: str, token: str) -> int:
    """Parse an unsigned decimal flag value.

    Args:
        flag: Flag the value belongs to, used in the error message.
        token: Raw value token.

    Returns:
        int: Parsed value.

    Raises:
        TreefindError: If ``token`` is not a plain run of ASCII digits or
            does not fit in 64 bits.
    """
    digits = token.lstrip("0") or "0"
    if not token.isascii() or not token.isdigit() or len(digits) > 20:
        raise TreefindError(f"invalid number for {flag}: '{token}'")
    value = int(digits)
    if value > MAX_COUNT:
        raise TreefindError(f"invalid number for {flag}: '{token}'")
    return value


def parse_size(token: str) -> tuple[SizeComparison, int]:
    """Parse a ``-size`` value such as ``+100``, ``-5``, ``=0`` or ``42``.

    A missing sign means :attr:`SizeComparison.EQUAL`.

    Raises:
        TreefindError: If the digits after the optional sign are not numeric.
    """
    comparison = _SIGNS.get(token[:1])
    if comparison is None:
        return SizeComparison.EQUAL, parse_count("-size", token)
    return comparison, parse_count("-size", token[1:])


def parse_args(argv: Sequence[str]) -> WalkConfig:
    """Parse the argument vector (without program name) into a config.

    The first token is always the root path. Every flag after it consumes
    exactly one value token, even when that token starts with ``-``.
    Repeating a flag replaces its earlier value.

    Args:
        argv: Raw arguments.

    Returns:
        WalkConfig: Parsed configuration.

    Raises:
        TreefindError: On a missing root, an unknown flag, a flag without
            a value, or a malformed numeric value.
    """
    if not argv:
        raise TreefindError("missing root path")

    root, tokens = argv[0], argv[1:]
    inode: int | None = None
    name: str | None = None
    size: tuple[SizeComparison, int] | None = None
    nlinks: int | None = None
    exec_path: str | None = None

    i = 0
    while i < len(tokens):
        flag = tokens[i]
        if flag not in FLAGS:
            raise TreefindError(f"unknown flag '{flag}'")
        if i + 1 >= len(tokens):
            raise TreefindError(f"missing value for {flag}")
        value = tokens[i + 1]
        i += 2

        if flag == "-inum":
            inode = parse_count(flag, value)
        elif flag == "-name":
            name = value
        elif flag == "-size":
            size = parse_size(value)
        elif flag == "-nlinks":
            nlinks = parse_count(flag, value)
        else:
            exec_path = value

    return WalkConfig(
        root=root,
        filter=FileFilter(inode=inode, name=name, size=size, nlinks=nlinks),
        exec_path=exec_path,
    )
