"""Short and verbose renderings of an error chain."""

from __future__ import annotations

import json

from failure.failure import Failure
from failure.query import call_stack_of
from failure.walker import walk

_INDENT = "    "


def _segments(f: Failure) -> list[str]:
    parts: list[str] = []
    if f.call_stack is not None:
        parts.append(f.call_stack.head_frame.func_name)
    if f.message:
        parts.append(f.message)
    if f.debug:
        parts.append(" ".join(f"{k}={v}" for k, v in f.debug.items()))
    if f.code is not None:
        parts.append(f"code({f.code.error_code()})")
    return parts


def short(err: BaseException | None) -> str:
    """Render the chain on one line.

    A failure created in ``mod.inner`` with message ``xxx`` and code ``a``,
    then translated to code ``1`` in ``mod.outer``, renders as
    ``mod.outer: code(1): mod.inner: xxx: code(a)``.
    """
    parts: list[str] = []
    for e in walk(err):
        if isinstance(e, Failure):
            parts.extend(_segments(e))
            continue
        text = str(e)
        if text:
            parts.append(text)
    return ": ".join(parts)


def verbose(err: BaseException | None) -> str:
    """Render the chain as a multi-line report ending with the merged call stack."""
    lines: list[str] = []
    for e in walk(err):
        if not isinstance(e, Failure):
            lines.append(f"{_INDENT}{e!r}")
            continue
        if e.call_stack is not None:
            lines.append(str(e.call_stack.head_frame))
        if e.message is not None:
            quoted = json.dumps(e.message, ensure_ascii=False)
            lines.append(f"{_INDENT}message({quoted})")
        if e.debug:
            lines.extend(f"{_INDENT}{k} = {v}" for k, v in e.debug.items())
        if e.code is not None:
            lines.append(f"{_INDENT}code({e.code.error_code()})")

    stack, ok = call_stack_of(err)
    if ok:
        lines.append("[CallStack]")
        lines.extend(f"{_INDENT}{frame}" for frame in stack)
    return "\n".join(lines)
