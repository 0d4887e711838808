import dataclasses
import os
import subprocess
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from os_completers.action import Action, ActionResult, Message, Values
from os_completers.osctx import OsContext

PASSWD = "root:x:0:0:root:/root:/bin/bash\nbin:x:1:1:bin:/bin:/sbin/nologin\n"
GROUP = "root:x:0:\naudio:x:63:alice\nwheel:x:10:alice,bob\n"


@dataclasses.dataclass(frozen=True)
class FakeOsContext(OsContext):
    """OsContext with canned process table and command output"""

    procs: Tuple[Tuple[str, int], ...] = ()
    procs_error: Optional[Exception] = None
    output: str = ""
    run_error: Optional[Exception] = None
    ran: List[List[str]] = dataclasses.field(default_factory=list)

    def processes(self) -> Iterator[Tuple[str, int]]:
        if self.procs_error:
            raise self.procs_error
        yield from self.procs

    def run(self, cmd: List[str]) -> str:
        self.ran.append(cmd)
        if self.run_error:
            raise self.run_error
        return self.output


def mkosctx(tmp_path: Path, **kwargs) -> FakeOsContext:
    """Context reading passwd and group from tmp_path"""
    passwd = tmp_path / "passwd"
    group = tmp_path / "group"
    passwd.write_text(kwargs.pop("passwd", PASSWD))
    group.write_text(kwargs.pop("group", GROUP))
    return FakeOsContext(passwd=str(passwd), group=str(group), **kwargs)


def mkfile(path: Path, mode: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n")
    os.chmod(path, mode)
    return path


def pairs(result: ActionResult) -> List[Tuple[str, str]]:
    assert isinstance(result, Values), f"Expected values, got {result}"
    return [(c.value, c.description) for c in result]


def message(result: ActionResult) -> str:
    assert isinstance(result, Message), f"Expected message, got {result}"
    return result.message


def invoke(action: Action, osctx: OsContext, value: str = "") -> ActionResult:
    return action.invoke((), value, osctx)


def called_process_error(stderr: str = "") -> subprocess.CalledProcessError:
    return subprocess.CalledProcessError(1, ["chsh", "--list-shells"], "", stderr)
