from __future__ import annotations

import dataclasses
import logging
import traceback
from abc import ABC, abstractmethod
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, Union

from click.shell_completion import CompletionItem
from typing_extensions import override

from .common_base import comp_debug
from .osctx import OsContext

log = logging.getLogger(__name__)

DESCRIPTION_MAX = 40
ELLIPSIS = "..."

NOSPACE = CompletionItem("", type="nospace")


def truncate(description: str, maxlen: int = DESCRIPTION_MAX) -> str:
    """Shorten description so it fits on a single completion line"""
    if len(description) > maxlen:
        return description[: maxlen - len(ELLIPSIS)] + ELLIPSIS
    return description


@dataclasses.dataclass(frozen=True)
class Candidate:
    value: str
    description: str = ""


@dataclasses.dataclass(frozen=True)
class Values:
    """Successful result of an action: ordered candidates"""

    candidates: Tuple[Candidate, ...] = ()
    prefix: str = ""
    """Text already typed, rendered in front of every value"""
    nospace: bool = False
    """Do not add a space after the completed value"""

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.candidates)

    def __len__(self) -> int:
        return len(self.candidates)

    def values(self) -> List[str]:
        return [c.value for c in self.candidates]

    def suffix(self, suffix: str) -> Values:
        return dataclasses.replace(
            self,
            candidates=tuple(
                Candidate(c.value + suffix, c.description) for c in self.candidates
            ),
            nospace=True,
        )

    def with_prefix(self, prefix: str) -> Values:
        return dataclasses.replace(self, prefix=prefix + self.prefix)

    def filter(self, incomplete: str) -> Values:
        """Keep candidates that, rendered with the prefix, start with incomplete"""
        return dataclasses.replace(
            self,
            candidates=tuple(
                c
                for c in self.candidates
                if (self.prefix + c.value).startswith(incomplete)
            ),
        )

    def completion_items(self) -> List[CompletionItem]:
        ret = [
            CompletionItem(self.prefix + c.value, help=c.description or None)
            for c in self.candidates
        ]
        if self.nospace and ret:
            ret = [NOSPACE, *ret]
        return ret


@dataclasses.dataclass(frozen=True)
class Message:
    """Failed result of an action: text shown to the user instead of candidates"""

    message: str

    def __len__(self) -> int:
        return 0

    def suffix(self, suffix: str) -> Message:
        return self

    def with_prefix(self, prefix: str) -> Message:
        return self

    def filter(self, incomplete: str) -> Message:
        return self

    def completion_items(self) -> List[CompletionItem]:
        return [CompletionItem(self.message, type="message")]


ActionResult = Union[Values, Message]


@dataclasses.dataclass(frozen=True)
class Context:
    args: Tuple[str, ...] = ()
    """Arguments already present on the command line"""
    value: str = ""
    """The argument currently being completed"""
    os: OsContext = dataclasses.field(default_factory=OsContext.from_environ)


class Action(ABC):
    """Produces completion candidates for one argument position"""

    @abstractmethod
    def _invoke(self, ctx: Context) -> ActionResult:
        raise NotImplementedError()

    def invoke_ctx(self, ctx: Context) -> ActionResult:
        try:
            return self._invoke(ctx)
        except Exception as e:
            comp_debug(f"{traceback.format_exc()} Exception: {e}")
            log.debug(f"{self!r} failed: {e}")
            return Message(str(e) or type(e).__name__)

    def invoke(
        self,
        args: Sequence[str] = (),
        value: str = "",
        osctx: Optional[OsContext] = None,
    ) -> ActionResult:
        return self.invoke_ctx(
            Context(tuple(args), value, osctx or OsContext.from_environ())
        )

    def suffix(self, suffix: str) -> Action:
        return ActionCallback(lambda ctx: self.invoke_ctx(ctx).suffix(suffix))

    def complete(
        self,
        args: Sequence[str],
        incomplete: str,
        osctx: Optional[OsContext] = None,
    ) -> List[CompletionItem]:
        """Invoke and render for click shell completion"""
        return self.invoke(args, incomplete, osctx).filter(incomplete).completion_items()


class ActionValues(Action):
    def __init__(self, *values: str):
        self.result = Values(tuple(Candidate(v) for v in values))

    @override
    def _invoke(self, ctx: Context) -> ActionResult:
        return self.result

    def __repr__(self):
        return f"ActionValues({len(self.result)})"


class ActionValuesDescribed(Action):
    """Takes value, description pairs"""

    def __init__(self, *pairs: str):
        assert len(pairs) % 2 == 0, f"Odd number of value/description pairs: {pairs}"
        self.result = Values(
            tuple(Candidate(v, d) for v, d in zip(pairs[::2], pairs[1::2]))
        )

    @override
    def _invoke(self, ctx: Context) -> ActionResult:
        return self.result

    def __repr__(self):
        return f"ActionValuesDescribed({len(self.result)})"


class ActionMessage(Action):
    def __init__(self, message: str):
        self.result = Message(message)

    @override
    def _invoke(self, ctx: Context) -> ActionResult:
        return self.result


class ActionCallback(Action):
    """Compute the candidates lazily at invocation time"""

    def __init__(self, cb: Callable[[Context], Union[Action, ActionResult]]):
        self.cb = cb

    @override
    def _invoke(self, ctx: Context) -> ActionResult:
        ret = self.cb(ctx)
        if isinstance(ret, Action):
            return ret.invoke_ctx(ctx)
        return ret

    def __repr__(self):
        return f"ActionCallback({getattr(self.cb, '__name__', self.cb)})"
