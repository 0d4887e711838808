# Only basic import functions, so that completion is as fast as possible.
import os
import subprocess
import sys
from typing import List

OSCOMPLETERS_PASSWD = "OSCOMPLETERS_PASSWD"
OSCOMPLETERS_GROUP = "OSCOMPLETERS_GROUP"
OSCOMPLETERS_TIMEOUT = "OSCOMPLETERS_TIMEOUT"
COMP_DEBUG = "COMP_DEBUG"

DEFAULT_PASSWD = "/etc/passwd"
DEFAULT_GROUP = "/etc/group"
DEFAULT_TIMEOUT = 2.0


def composed(*decs):
    """Merge decorators into one decorator"""

    def deco(f):
        for dec in reversed(decs):
            f = dec(f)
        return f

    return deco


def get_version():
    # Load lazily, to optimize for import speed.
    import importlib.metadata

    return importlib.metadata.version("os-completers")


def print_version():
    # Copied from version_option()
    print(f"{os.path.basename(sys.argv[0])}, version {get_version()}")


def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)


def comp_debug(msg: str):
    """Print a message to stderr when COMP_DEBUG is set. Stdout belongs to the shell."""
    if os.environ.get(COMP_DEBUG):
        print(f"\n{msg}\n", file=sys.stderr)


class shell_completion:
    @staticmethod
    def install_script() -> List[str]:
        dir = "~/.local/share/bash-completion/completions"
        script: List[str] = []
        script.append(f"mkdir -vp {dir}")
        name = "oscompleters"
        upname = name.upper().replace("-", "_")
        script.append(
            f"echo 'eval \"$(_{upname}_COMPLETE=bash_source {name})\"' > {dir}/{name}"
        )
        return script

    @staticmethod
    def install():
        for line in shell_completion.install_script():
            eprint(f"+ {line}")
            subprocess.check_call(["bash", "-c", line])

    @staticmethod
    def print():
        print("This project uses click python module.")
        print(
            "See https://click.palletsprojects.com/en/8.1.x/shell-completion/ on how to install completion."
        )
        print("For bash-completion, execute the following:")
        for line in shell_completion.install_script():
            print(f"   {line}")
