from __future__ import annotations

import json

import click

from .common import h_help_quiet_verbose_logging_options
from .mytabulate import mytabulate
from .osactions import ACTIONS


@click.command(
    "actions",
    help="""
List names of available completion actions.
""",
)
@click.option("-j", "--json", "dojson", is_flag=True, help="Output in json")
@h_help_quiet_verbose_logging_options()
def cli(dojson: bool):
    if dojson:
        print(json.dumps({k: v.help for k, v in ACTIONS.items()}))
    else:
        print(mytabulate([[k, v.help] for k, v in ACTIONS.items()]))
