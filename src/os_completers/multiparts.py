"""Completion of arguments made of delimiter separated parts, like user:group"""

from __future__ import annotations

import dataclasses
from typing import Callable, List, Union

from typing_extensions import override

from .action import Action, ActionResult, Context, Values


class ActionMultiParts(Action):
    """
    Split the current value on delimiter and complete only the last part.
    The callback receives the parts already typed. The typed parts are kept
    in the prefix of the result, so the candidates themselves stay untouched.
    """

    def __init__(
        self,
        delimiter: str,
        callback: Callable[[Context, List[str]], Union[Action, ActionResult]],
    ):
        assert delimiter, "Delimiter must not be empty"
        self.delimiter = delimiter
        self.callback = callback

    @override
    def _invoke(self, ctx: Context) -> ActionResult:
        splitted: List[str] = ctx.value.split(self.delimiter)
        parts: List[str] = splitted[:-1]
        current: str = splitted[-1]
        partctx = dataclasses.replace(ctx, value=current)
        ret = self.callback(partctx, parts)
        if isinstance(ret, Action):
            ret = ret.invoke_ctx(partctx)
        prefix = "".join(x + self.delimiter for x in parts)
        return ret.with_prefix(prefix)


class ActionCompound(ActionMultiParts):
    """
    Complete each delimiter separated part with the next action from segments.
    All parts but the last are suffixed with the delimiter.
    Nothing is completed after all segments were typed.
    """

    def __init__(self, delimiter: str, *segments: Action):
        assert len(segments) >= 2, f"Compound needs at least 2 segments: {segments}"
        self.segments = segments
        super().__init__(delimiter, self.__segment)

    def __segment(self, ctx: Context, parts: List[str]) -> Union[Action, ActionResult]:
        idx = len(parts)
        if idx >= len(self.segments):
            return Values()
        action = self.segments[idx]
        if idx < len(self.segments) - 1:
            return action.suffix(self.delimiter)
        return action

    def __repr__(self):
        return f"ActionCompound({self.delimiter!r}, {', '.join(map(repr, self.segments))})"
