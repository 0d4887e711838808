# ruff: noqa: F403
from .common_base import *  # noqa: W0614
from .common_click import *  # noqa: W0614
