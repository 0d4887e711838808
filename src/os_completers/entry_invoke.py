from __future__ import annotations

import json
import logging
from typing import Tuple

import click

from .action import ActionValuesDescribed, Message
from .common import completor, eprint, h_help_quiet_verbose_logging_options
from .mytabulate import mytabulate
from .osactions import ACTIONS, get_action
from .osctx import OsContext

log = logging.getLogger(__name__)


def complete_action_value(
    ctx: click.Context, param: click.Parameter, incomplete: str
):
    """Complete the value with the action selected on the command line"""
    name = ctx.params.get("action")
    if name not in ACTIONS:
        return []
    return completor(get_action(name))(ctx, param, incomplete)


@click.command(
    "invoke",
    help="""
Invoke a completion action and print the candidates.

VALUE is the argument being completed, for example 'root:' for user_group.
Candidates are printed as value and description columns.
When the action fails, the message is printed to stderr and exit status is 1.
""",
)
@click.option(
    "-a",
    "--arg",
    "args",
    multiple=True,
    help="Argument already present on the command line. Can be given multiple times.",
)
@click.option("-j", "--json", "dojson", is_flag=True, help="Output in json")
@click.option(
    "-f",
    "--filter",
    "dofilter",
    is_flag=True,
    help="Only print candidates starting with VALUE",
)
@click.argument(
    "action",
    type=click.Choice(list(ACTIONS)),
    shell_complete=completor(
        ActionValuesDescribed(*(y for k, v in ACTIONS.items() for y in (k, v.help)))
    ),
)
@click.argument("value", default="", shell_complete=complete_action_value)
@h_help_quiet_verbose_logging_options()
def cli(args: Tuple[str, ...], dojson: bool, dofilter: bool, action: str, value: str):
    osctx = OsContext.from_environ()
    log.debug(f"Invoking {action} args={args} value={value!r}")
    result = get_action(action).invoke(args, value, osctx)
    if dofilter:
        result = result.filter(value)
    if isinstance(result, Message):
        eprint(result.message)
        raise click.exceptions.Exit(1)
    if dojson:
        print(
            json.dumps(
                dict(
                    prefix=result.prefix,
                    nospace=result.nospace,
                    candidates=[[c.value, c.description] for c in result],
                )
            )
        )
    else:
        print(mytabulate([[result.prefix + c.value, c.description] for c in result]))
