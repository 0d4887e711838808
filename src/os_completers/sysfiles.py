"""Completion of entries from colon separated system databases like /etc/passwd"""

import logging
from typing import List

from typing_extensions import override

from .action import Action, ActionResult, Candidate, Context, Values

log = logging.getLogger(__name__)


def parse_colon_database(content: str) -> List[Candidate]:
    """
    Parse name:password:id:... records into (name, id) candidates.
    Lines with less than 3 fields and entries with blank names are ignored.
    """
    ret: List[Candidate] = []
    for entry in content.split("\n"):
        splitted = entry.split(":")
        if len(splitted) > 2:
            name = splitted[0]
            id = splitted[2]
            if name.strip():
                ret.append(Candidate(name, id))
    return ret


class ActionColonDatabase(Action):
    """Completes names from a database file. A missing file is not an error"""

    def __init__(self, attr: str):
        # Name of the OsContext attribute holding the database path.
        self.attr = attr

    @override
    def _invoke(self, ctx: Context) -> ActionResult:
        path: str = getattr(ctx.os, self.attr)
        try:
            content = ctx.os.read_text(path)
        except OSError as e:
            log.debug(f"Could not read {path}: {e}")
            return Values()
        return Values(tuple(parse_colon_database(content)))

    def __repr__(self):
        return f"ActionColonDatabase({self.attr})"


def action_users() -> Action:
    """
    System user names
      root (0)
      daemon (1)
    """
    return ActionColonDatabase("passwd")


def action_groups() -> Action:
    """
    System group names
      root (0)
      ssh (101)
    """
    return ActionColonDatabase("group")
