"""Recover structured information from an error chain.

Every query accepts ``None`` and returns a ``(value, found)`` pair; when
nothing matches the value is the zero value of its type.
"""

from __future__ import annotations

from collections.abc import Mapping

from failure.callstack import CallStack, Frame
from failure.code import Code
from failure.failure import Failure
from failure.walker import walk


def code_of(err: BaseException | None) -> tuple[Code | None, bool]:
    """Return the code closest to the head of the chain."""
    for e in walk(err):
        if isinstance(e, Failure) and e.code is not None:
            return e.code, True
    return None, False


def is_code(err: BaseException | None, code: Code, *codes: Code) -> bool:
    found, ok = code_of(err)
    return ok and found in (code, *codes)


def message_of(err: BaseException | None) -> tuple[str, bool]:
    """Return the message closest to the head of the chain."""
    for e in walk(err):
        if isinstance(e, Failure) and e.message is not None:
            return e.message, True
    return "", False


def debugs_of(err: BaseException | None) -> tuple[list[Mapping[str, str]], bool]:
    """Return every debug map in the chain, outermost first."""
    debugs = [
        e.debug for e in walk(err) if isinstance(e, Failure) and e.debug is not None
    ]
    return debugs, bool(debugs)


def call_stack_of(err: BaseException | None) -> tuple[CallStack | None, bool]:
    """Return the call stacks of all failures in the chain, concatenated.

    Each failure contributes its own frames, innermost first, and failures
    follow each other outermost first. Frames are not deduplicated.
    """
    frames: list[Frame] = []
    for e in walk(err):
        if isinstance(e, Failure) and e.call_stack is not None:
            frames.extend(e.call_stack)
    if not frames:
        return None, False
    return CallStack(tuple(frames)), True


def cause_of(err: BaseException | None) -> tuple[BaseException | None, bool]:
    """Return the innermost error of the chain, the one that started it."""
    cause: BaseException | None = None
    for cause in walk(err):
        pass
    return cause, cause is not None
