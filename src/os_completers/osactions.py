"""Actions related to the operating system, by name"""

import dataclasses
from typing import Callable, Dict

from .action import Action
from .external import action_shells
from .livestate import (
    ActionEnvironmentVariables,
    ActionPathExecutables,
    ActionProcessExecutables,
)
from .multiparts import ActionCompound
from .sysfiles import action_groups, action_users
from .tables import action_kill_signals, action_process_states


def action_user_group() -> Action:
    """
    System user:group separately
      bin:audio
      lp:list
    """
    return ActionCompound(":", action_users(), action_groups())


@dataclasses.dataclass(frozen=True)
class Registered:
    factory: Callable[[], Action]
    help: str


ACTIONS: Dict[str, Registered] = {
    "environment_variables": Registered(
        ActionEnvironmentVariables, "Environment variables and their values"
    ),
    "groups": Registered(action_groups, "System group names"),
    "kill_signals": Registered(action_kill_signals, "Linux kill signals"),
    "path_executables": Registered(
        ActionPathExecutables, "Executable files from PATH"
    ),
    "process_executables": Registered(
        ActionProcessExecutables, "Executable names of current processes"
    ),
    "process_states": Registered(action_process_states, "Linux process states"),
    "shells": Registered(action_shells, "Available terminal shells"),
    "user_group": Registered(action_user_group, "System user:group separately"),
    "users": Registered(action_users, "System user names"),
}


def get_action(name: str) -> Action:
    """Construct a fresh action registered under name"""
    return ACTIONS[name].factory()
