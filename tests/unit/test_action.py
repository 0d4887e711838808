from os_completers.action import (
    ActionCallback,
    ActionMessage,
    ActionValues,
    ActionValuesDescribed,
    Candidate,
    Message,
    Values,
    truncate,
)
from os_completers.osctx import OsContext
from tests.testlib import message, pairs


def test_truncate():
    assert truncate("") == ""
    assert truncate("a" * 40) == "a" * 40
    assert truncate("a" * 41) == "a" * 37 + "..."
    assert len(truncate("a" * 41)) == 40
    assert truncate("b" * 100) == "b" * 37 + "..."


def test_candidate_keeps_long_description():
    c = Candidate("v" * 50, "d" * 50)
    assert c.value == "v" * 50
    assert c.description == "d" * 50


def test_values_described():
    ret = ActionValuesDescribed("a", "first", "b", "second").invoke(osctx=OsContext())
    assert pairs(ret) == [("a", "first"), ("b", "second")]


def test_values_keep_order():
    assert ActionValues("z", "a", "m").invoke(osctx=OsContext()).values() == [
        "z",
        "a",
        "m",
    ]


def test_action_suffix():
    ret = ActionValues("a", "b").suffix(":").invoke(osctx=OsContext())
    assert isinstance(ret, Values)
    assert ret.values() == ["a:", "b:"]
    assert ret.nospace


def test_message_passes_helpers():
    ret = ActionMessage("broken").suffix(":").invoke(osctx=OsContext())
    assert message(ret) == "broken"
    assert ret.filter("x") == ret
    assert ret.with_prefix("p") == ret


def test_exception_becomes_message():
    def cb(ctx):
        raise RuntimeError("boom")

    assert message(ActionCallback(cb).invoke(osctx=OsContext())) == "boom"


def test_callback_receives_context():
    seen = []

    def cb(ctx):
        seen.append((ctx.args, ctx.value))
        return ActionValues("x")

    ActionCallback(cb).invoke(["a", "b"], "cur", OsContext())
    assert seen == [(("a", "b"), "cur")]


def test_callback_no_args():
    ret = ActionCallback(lambda ctx: Values((Candidate(str(len(ctx.args))),)))
    assert ret.invoke(osctx=OsContext()).values() == ["0"]


def test_filter_and_completion_items():
    ret = Values((Candidate("alice", "1000"), Candidate("bob")), prefix="x:")
    items = ret.filter("x:a").completion_items()
    assert [(i.value, i.help, i.type) for i in items] == [("x:alice", "1000", "plain")]


def test_completion_items_nospace():
    items = Values((Candidate("a:"),), nospace=True).completion_items()
    assert [i.type for i in items] == ["nospace", "plain"]
    assert Values(nospace=True).completion_items() == []


def test_message_completion_items():
    items = Message("no chsh").completion_items()
    assert [(i.type, i.value) for i in items] == [("message", "no chsh")]


def test_complete():
    items = ActionValues("alpha", "beta", "alps").complete([], "al", OsContext())
    assert [i.value for i in items] == ["alpha", "alps"]
