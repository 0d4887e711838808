from __future__ import annotations

import dataclasses
import logging
import os
import subprocess
from pathlib import Path
from typing import Iterator, List, Mapping, Optional, Tuple

import psutil

from .common_base import (
    DEFAULT_GROUP,
    DEFAULT_PASSWD,
    DEFAULT_TIMEOUT,
    OSCOMPLETERS_GROUP,
    OSCOMPLETERS_PASSWD,
    OSCOMPLETERS_TIMEOUT,
)

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class OsContext:
    """
    Read-only view of the operating system used by actions.
    Every query an action makes goes through here, so tests can replace
    the environment, the database paths or the process and command queries.
    """

    environ: Mapping[str, str] = dataclasses.field(default_factory=dict)
    passwd: str = DEFAULT_PASSWD
    group: str = DEFAULT_GROUP
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> OsContext:
        environ = dict(os.environ if environ is None else environ)
        timeout = DEFAULT_TIMEOUT
        timeouttxt = environ.get(OSCOMPLETERS_TIMEOUT)
        if timeouttxt:
            try:
                timeout = float(timeouttxt)
            except ValueError:
                log.warning(
                    f"Invalid {OSCOMPLETERS_TIMEOUT}={timeouttxt!r}, using {timeout}"
                )
        return cls(
            environ=environ,
            passwd=environ.get(OSCOMPLETERS_PASSWD) or DEFAULT_PASSWD,
            group=environ.get(OSCOMPLETERS_GROUP) or DEFAULT_GROUP,
            timeout=timeout,
        )

    def getenv(self, name: str, default: str = "") -> str:
        return self.environ.get(name, default)

    def read_text(self, path: str) -> str:
        return Path(path).read_text(errors="replace")

    def scandir(self, path: str) -> List[os.DirEntry]:
        with os.scandir(path) as it:
            return list(it)

    def processes(self) -> Iterator[Tuple[str, int]]:
        """Yield (name, pid) of running processes. Raises psutil.Error on failure"""
        for proc in psutil.process_iter(["pid", "name"]):
            name = proc.info["name"]
            if name:
                yield name, proc.info["pid"]

    def run(self, cmd: List[str]) -> str:
        """Run command and return its stdout. Raises OSError or SubprocessError"""
        log.debug(f"+ {' '.join(cmd)}")
        return subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=True,
            timeout=self.timeout,
            env=dict(self.environ),
        ).stdout
