#!/usr/bin/env python3
import click
from click.shell_completion import BashComplete

from . import entry_actions, entry_invoke
from .common_click import EPILOG, help_h_option, main_options, osctx_options

# Problem: mising nospace handling in python.click.
# Solution: custom bash completion code.
# Problem: bash COMP_WORDBREAKS splits on colon `:`, which breaks user:group.
# Solution: use bash-completion helpers.
# Problem: actions may fail with a message instead of candidates.
# Solution: print the message on stderr below the prompt.
BashComplete.source_template = r"""\
    %(complete_func)s() {
        local cword words=()
        # __reassemble_comp_words_by_ref renamed to _comp__reassemble_words in newer bash-completion
        if [[ $(type -t __reassemble_comp_words_by_ref) == function ]]; then
            __reassemble_comp_words_by_ref "=:" words cword
        elif [[ $(type -t _comp__reassemble_words) == function ]]; then
            _comp__reassemble_words "=:" words cword
        else
            words=("${COMP_WORDS[@]}")
            cword=${COMP_CWORD}
        fi
        local IFS=$'\n'
        response=$(COMP_POINT=$COMP_POINT COMP_WORDS="${words[*]}" COMP_CWORD="$cword" %(complete_var)s=bash_complete $1)
        for completion in $response; do
            IFS=',' read type value <<< "$completion"
            case $type in
                dir) COMPREPLY=(); compopt -o dirnames; ;;
                file) COMPREPLY=(); compopt -o default; ;;
                plain) COMPREPLY+=("$value"); ;;
                nospace) compopt -o nospace; ;;
                message) COMPREPLY=(); printf '\n%%s\n' "$value" >&2; ;;
            esac
        done
    }
    %(complete_func)s_setup() {
        complete -o nosort -F %(complete_func)s %(prog_name)s
    }
    %(complete_func)s_setup;
"""


class AliasedGroup(click.Group):
    """Group that accepts any unique prefix of a subcommand name"""

    def get_command(self, ctx, cmd_name):
        rv = click.Group.get_command(self, ctx, cmd_name)
        if rv is not None:
            return rv
        matches = [x for x in self.list_commands(ctx) if x.startswith(cmd_name)]
        if not matches:
            return None
        elif len(matches) != 1:
            ctx.fail(f"Too many matches: {', '.join(sorted(matches))}")
        return click.Group.get_command(self, ctx, matches[0])

    def resolve_command(self, ctx, args):
        # always return the full command name
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, args


@click.group(
    "oscompleters",
    cls=AliasedGroup,
    help="Shell completion of users, groups, processes, signals and other system values.",
    epilog=EPILOG,
)
@osctx_options()
@help_h_option()
@main_options()
def cli():
    pass


cli.add_command(entry_actions.cli)
cli.add_command(entry_invoke.cli)


def main():
    cli(max_content_width=9999)


if __name__ == "__main__":
    main()
