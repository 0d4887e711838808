"""Completion of values queried from the running system"""

import logging
import stat
from typing import List, Set

import psutil
from typing_extensions import override

from .action import (
    Action,
    ActionResult,
    Candidate,
    Context,
    Message,
    Values,
    truncate,
)

log = logging.getLogger(__name__)


class ActionEnvironmentVariables(Action):
    """
    Environment variable names described with their values
      SHELL (/bin/bash)
      LANG (en_US.utf8)
    """

    @override
    def _invoke(self, ctx: Context) -> ActionResult:
        return Values(
            tuple(Candidate(k, truncate(v)) for k, v in ctx.os.environ.items())
        )


class ActionProcessExecutables(Action):
    """
    Executable names of running processes described with their pid
      NetworkManager (439)
      cupsd (454)
    """

    @override
    def _invoke(self, ctx: Context) -> ActionResult:
        try:
            processes = list(ctx.os.processes())
        except (psutil.Error, OSError) as e:
            log.debug(f"Could not list processes: {e}")
            return Message(str(e) or type(e).__name__)
        return Values(tuple(Candidate(name, str(pid)) for name, pid in processes))


def is_exec_any(mode: int) -> bool:
    """True if any of user, group or other execute bits is set"""
    return mode & 0o111 != 0


def path_executables(ctx: Context) -> Set[str]:
    executables: Set[str] = set()
    for folder in ctx.os.getenv("PATH").split(":"):
        try:
            entries = ctx.os.scandir(folder)
        except OSError as e:
            log.debug(f"Skipping {folder!r} from PATH: {e}")
            continue
        for entry in entries:
            try:
                # Symlinks are not regular files.
                mode = entry.stat(follow_symlinks=False).st_mode
            except OSError:
                # File removed meanwhile.
                continue
            if stat.S_ISREG(mode) and is_exec_any(mode):
                executables.add(entry.name)
    return executables


class ActionPathExecutables(Action):
    """
    Executable files from directories in PATH
      nvim
      chmod
    """

    @override
    def _invoke(self, ctx: Context) -> ActionResult:
        executables: List[str] = list(path_executables(ctx))
        return Values(tuple(Candidate(x) for x in executables))
