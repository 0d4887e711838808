import logging
import os
import traceback
from typing import Any, List, Optional

import click
from click.shell_completion import CompletionItem

from .action import Action
from .common_base import (
    DEFAULT_GROUP,
    DEFAULT_PASSWD,
    DEFAULT_TIMEOUT,
    OSCOMPLETERS_GROUP,
    OSCOMPLETERS_PASSWD,
    OSCOMPLETERS_TIMEOUT,
    comp_debug,
    composed,
    print_version,
    shell_completion,
)
from .osctx import OsContext

EPILOG = "Licensed under GNU GPL version 3 or later."


def click_args(ctx: Optional[click.Context]) -> List[str]:
    """Collect string values of already parsed parameters in order"""
    ret: List[str] = []
    for value in (ctx.params.values() if ctx else []):
        if isinstance(value, str):
            ret.append(value)
        elif isinstance(value, (tuple, list)):
            ret.extend(x for x in value if isinstance(x, str))
    return ret


def completor(action: Action):
    def completor_cb(
        ctx: click.Context, param: click.Parameter, incomplete: str
    ) -> List[CompletionItem]:
        try:
            return action.complete(
                click_args(ctx), incomplete, OsContext.from_environ()
            )
        except Exception as e:
            comp_debug(f"{traceback.format_exc()} Exception: {e}")
            return []

    return completor_cb


def click_callback_wrap_exit(cb):
    """Execute a callback from click callback function and exit"""

    def wrap(ctx: click.Context, param: click.Parameter, value: str):
        if not value or ctx.resilient_parsing:
            return
        cb()
        ctx.exit()

    return wrap


def main_options():
    return composed(
        click.option(
            "--version",
            is_flag=True,
            callback=click_callback_wrap_exit(print_version),
            expose_value=False,
            is_eager=True,
            help="Print program version then exit.",
        ),
        click.option(
            "--autocomplete-info",
            is_flag=True,
            callback=click_callback_wrap_exit(shell_completion.print),
            expose_value=False,
            is_eager=True,
            help="Print shell completion information.",
        ),
        click.option(
            "--autocomplete-install",
            is_flag=True,
            callback=click_callback_wrap_exit(shell_completion.install),
            expose_value=False,
            is_eager=True,
            help="Install shell completion.",
        ),
    )


def envvar_option(*param_decls: str, envvar: str, default: Any, **attrs: Any):
    """Option that sets an environment variable read by OsContext.from_environ"""
    help = attrs.pop("help")
    return click.option(
        *param_decls,
        envvar=envvar,
        expose_value=False,
        show_default=True,
        default=os.environ.get(envvar, default),
        callback=lambda ctx, param, value: os.environ.__setitem__(envvar, str(value)),
        help=f"{help} Sets {envvar} environment variable.",
        **attrs,
    )


def osctx_options():
    return composed(
        envvar_option(
            "--passwd",
            envvar=OSCOMPLETERS_PASSWD,
            default=DEFAULT_PASSWD,
            type=click.Path(dir_okay=False),
            help="User database file.",
        ),
        envvar_option(
            "--group",
            envvar=OSCOMPLETERS_GROUP,
            default=DEFAULT_GROUP,
            type=click.Path(dir_okay=False),
            help="Group database file.",
        ),
        envvar_option(
            "--timeout",
            envvar=OSCOMPLETERS_TIMEOUT,
            default=DEFAULT_TIMEOUT,
            type=float,
            help="Timeout in seconds of external commands.",
        ),
    )


def help_h_option():
    return click.help_option("-h", "--help")


def verbose_option():
    return click.option(
        "-v",
        "--verbose",
        count=True,
        expose_value=False,
        is_eager=True,
        callback=lambda ctx, opt, value: (
            logging.root.setLevel(max(logging.NOTSET, logging.root.level - 10 * value))
        ),
        help="Be more verbose",
    )


def quiet_option():
    return click.option(
        "-q",
        "--quiet",
        count=True,
        expose_value=False,
        is_eager=True,
        callback=lambda ctx, opt, value: (
            logging.root.setLevel(
                min(logging.CRITICAL + 10, logging.root.level + 10 * value)
            )
        ),
        help="Be more quiet",
    )


def logging_config(format: Optional[str] = None, datefmt: Optional[str] = None):
    def wrapper(f):
        logging.basicConfig(
            level=logging.root.level - 10,
            format=format
            or "%(levelname)s %(name)s:%(funcName)s:%(lineno)d: %(message)s",
            datefmt=datefmt,
        )
        return f

    return wrapper


def h_help_quiet_verbose_logging_options(
    format: Optional[str] = None, datefmt: Optional[str] = None
):
    return composed(
        logging_config(format=format, datefmt=datefmt),
        verbose_option(),
        quiet_option(),
        help_h_option(),
    )
