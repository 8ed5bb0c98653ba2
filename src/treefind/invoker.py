"""Run an external program once per matched file."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Sequence

logger = logging.getLogger(__name__)


def invoke(args: Sequence[str]) -> int | None:
    """Run ``args[0]`` with the remaining items as its arguments and wait.

    No shell is involved and ``PATH`` is never searched: a name without a
    directory part refers to a file in the current directory. Failures
    never propagate: a program that cannot be started is reported on
    stderr and the walk goes on.

    Args:
        args: Executable path followed by its arguments.

    Returns:
        int | None: Child exit status, or ``None`` when it could not run.
    """
    cmd = list(args)
    executable = cmd[0]
    if not os.path.dirname(executable):
        executable = os.path.join(os.curdir, executable)

    sys.stdout.flush()
    try:
        proc = subprocess.run(cmd, executable=executable, check=False)
    except OSError as exc:
        sys.stderr.write(f"tfind: cannot execute '{cmd[0]}': {exc.strerror or exc}\n")
        return None

    if proc.returncode != 0:
        logger.debug("%s exited with status %d", cmd[0], proc.returncode)
    return proc.returncode
