"""Recursive directory walker built on os.scandir (depth-first, pre-order)."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

from treefind.filter import FileFilter
from treefind.invoker import invoke

logger = logging.getLogger(__name__)

Invoker = Callable[[Sequence[str]], int | None]


@dataclass(frozen=True, slots=True)
class Match:
    """A regular file that passed the filter.

    Attributes:
        path: Parent path joined with the entry name.
        name: Basename of the file.
    """

    path: str
    name: str


class Walker:
    """Walk a tree, print each matching regular file and optionally run a program on it.

    Directories are always descended into; filters apply to regular files
    only. Symlinks, devices, sockets and fifos are skipped entirely. A
    directory that cannot be read is reported on stderr and only its own
    subtree is abandoned.
    """

    def __init__(
        self,
        file_filter: FileFilter | None = None,
        exec_path: str | None = None,
        invoker: Invoker = invoke,
        out: TextIO | None = None,
    ) -> None:
        """Initialize walker.

        Args:
            file_filter: Predicates for regular files. Defaults to match-all.
            exec_path: Program run as ``[exec_path, match.path]`` per match.
            invoker: Callable used to run ``exec_path``.
            out: Stream receiving matched paths. Defaults to ``sys.stdout``.
        """
        self._filter = file_filter or FileFilter()
        self._exec_path = exec_path
        self._invoker = invoker
        self._out = out

    def walk(self, root: str) -> int:
        """Print every match under *root*, one per line, in traversal order.

        When an exec path is configured it runs after the path is printed,
        and the walk waits for it before moving on.

        Returns:
            int: Number of matched files.
        """
        out = self._out or sys.stdout
        count = 0
        for match in self.iter_matches(root):
            out.write(match.path + "\n")
            if self._exec_path is not None:
                out.flush()
                self._invoker([self._exec_path, match.path])
            count += 1
        return count

    def iter_matches(self, root: str) -> Iterator[Match]:
        """Yield matching regular files under *root* without printing them."""
        yield from self._walk_dir(root)

    def _walk_dir(self, path: str) -> Iterator[Match]:
        try:
            it = os.scandir(path)
        except OSError as exc:
            self._report(path, exc)
            return

        with it:
            while True:
                try:
                    entry = next(it)
                except StopIteration:
                    break
                except OSError as exc:
                    self._report(path, exc)
                    break

                name = entry.name
                full_path = os.path.join(path, name)
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                    is_file = not is_dir and entry.is_file(follow_symlinks=False)
                except OSError:
                    logger.debug("Cannot stat: %s", full_path)
                    continue

                if is_dir:
                    yield from self._walk_dir(full_path)
                elif is_file:
                    if self._filter.matches(full_path, name):
                        yield Match(path=full_path, name=name)

    @staticmethod
    def _report(path: str, exc: OSError) -> None:
        logger.debug("Cannot open directory %s: %s", path, exc)
        sys.stderr.write(f"tfind: cannot open directory '{path}': {exc.strerror or exc}\n")
