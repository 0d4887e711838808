import pytest

from os_completers.sysfiles import action_groups, action_users, parse_colon_database
from tests.testlib import PASSWD, invoke, mkosctx, pairs


def test_parse_passwd():
    assert [(c.value, c.description) for c in parse_colon_database(PASSWD)] == [
        ("root", "0"),
        ("bin", "1"),
    ]


@pytest.mark.parametrize(
    "line,expected",
    [
        ("name:x:42:y:z", [("name", "42")]),
        ("name:x:42", [("name", "42")]),
        ("name:x", []),
        ("name", []),
        ("", []),
        ("   :x:5:y:z", []),
        ("\t:x:5", []),
        (" pad :x:5", [(" pad ", "5")]),
    ],
)
def test_parse_line(line, expected):
    assert [(c.value, c.description) for c in parse_colon_database(line)] == expected


def test_users(tmp_path):
    assert pairs(invoke(action_users(), mkosctx(tmp_path))) == [("root", "0"), ("bin", "1")]


def test_groups(tmp_path):
    assert pairs(invoke(action_groups(), mkosctx(tmp_path))) == [
        ("root", "0"),
        ("audio", "63"),
        ("wheel", "10"),
    ]


def test_missing_database_is_empty(tmp_path):
    osctx = mkosctx(tmp_path)
    (tmp_path / "passwd").unlink()
    assert pairs(invoke(action_users(), osctx)) == []


def test_database_is_directory(tmp_path):
    osctx = mkosctx(tmp_path)
    (tmp_path / "group").unlink()
    (tmp_path / "group").mkdir()
    assert pairs(invoke(action_groups(), osctx)) == []
