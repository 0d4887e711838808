"""Completion of values printed by external programs"""

import logging
import subprocess
from typing import Callable, List

from typing_extensions import override

from .action import (
    Action,
    ActionResult,
    ActionValues,
    Context,
    Message,
)

log = logging.getLogger(__name__)


def split_lines(output: str) -> Action:
    return ActionValues(*(x for x in output.split("\n") if x))


def describe_error(e: Exception) -> str:
    if isinstance(e, subprocess.CalledProcessError):
        stderr = (e.stderr or "").strip()
        if stderr:
            return stderr.splitlines()[-1]
    return str(e)


class ActionExecCommand(Action):
    """
    Run a command and build candidates from its standard output.
    Failure to run the command is reported as a message.
    """

    def __init__(
        self,
        command: str,
        *args: str,
        callback: Callable[[str], Action] = split_lines,
    ):
        self.cmd: List[str] = [command, *args]
        self.callback = callback

    @override
    def _invoke(self, ctx: Context) -> ActionResult:
        try:
            output = ctx.os.run(self.cmd)
        except (OSError, subprocess.SubprocessError) as e:
            log.debug(f"Command {self.cmd} failed: {e}")
            return Message(describe_error(e))
        return self.callback(output).invoke_ctx(ctx)

    def __repr__(self):
        return f"ActionExecCommand({self.cmd})"


def action_shells() -> Action:
    """
    Available terminal shells
      /bin/elvish
      /bin/bash
    """
    return ActionExecCommand("chsh", "--list-shells")
