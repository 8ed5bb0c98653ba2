"""File filtering: inode, exact-name, size and hard-link predicates."""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class SizeComparison(enum.Enum):
    """How a file size is compared against the ``-size`` value."""

    LESS = "-"
    EQUAL = "="
    GREATER = "+"

    def accepts(self, actual: int, wanted: int) -> bool:
        """Return whether ``actual`` satisfies this comparison against ``wanted``."""
        if self is SizeComparison.LESS:
            return actual < wanted
        if self is SizeComparison.GREATER:
            return actual > wanted
        return actual == wanted


@dataclass(frozen=True, slots=True)
class FileFilter:
    """Conjunction of optional metadata predicates.

    An unset predicate (``None``) accepts every file. A file matches only
    when every set predicate accepts it.

    Attributes:
        inode: Required inode number (``-inum``).
        name: Required base name, compared exactly (``-name``).
        size: Comparison and byte count (``-size``).
        nlinks: Required hard-link count (``-nlinks``).
    """

    inode: int | None = None
    name: str | None = None
    size: tuple[SizeComparison, int] | None = None
    nlinks: int | None = None

    @property
    def needs_stat(self) -> bool:
        """Whether any set predicate requires ``stat`` metadata."""
        return self.inode is not None or self.size is not None or self.nlinks is not None

    def matches(self, path: str, name: str) -> bool:
        """Return whether a regular file satisfies every configured predicate.

        Args:
            path: Full path of the file, used for ``stat``.
            name: Base name of the file.

        Returns:
            bool: ``True`` when all set predicates pass. A file that can no
            longer be stat'd never matches.
        """
        if self.name is not None and name != self.name:
            return False
        if not self.needs_stat:
            return True

        try:
            st = os.stat(path)
        except OSError as exc:
            logger.debug("Cannot stat %s: %s", path, exc.strerror)
            return False

        if self.inode is not None and st.st_ino != self.inode:
            return False
        if self.size is not None:
            comparison, wanted = self.size
            if not comparison.accepts(st.st_size, wanted):
                return False
        if self.nlinks is not None and st.st_nlink != self.nlinks:
            return False
        return True
