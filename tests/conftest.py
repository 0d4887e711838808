import os

import pytest

from os_completers.common_base import (
    COMP_DEBUG,
    OSCOMPLETERS_GROUP,
    OSCOMPLETERS_PASSWD,
    OSCOMPLETERS_TIMEOUT,
)


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    """The click options export configuration to os.environ. Do not leak it between tests."""
    for name in [OSCOMPLETERS_PASSWD, OSCOMPLETERS_GROUP, OSCOMPLETERS_TIMEOUT, COMP_DEBUG]:
        monkeypatch.delenv(name, raising=False)
    yield
    for name in [OSCOMPLETERS_PASSWD, OSCOMPLETERS_GROUP, OSCOMPLETERS_TIMEOUT]:
        os.environ.pop(name, None)
