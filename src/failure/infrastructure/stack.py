from __future__ import annotations

import sys
import traceback
from itertools import islice
from types import FrameType

from failure.callstack import CallStack, Frame


def _to_frame(frame: FrameType, lineno: int | None) -> Frame:
    code = frame.f_code
    return Frame(
        function=code.co_qualname,
        path=code.co_filename,
        line=lineno or 0,
        module=frame.f_globals.get("__name__", ""),
    )


def capture(skip: int = 0, limit: int | None = None) -> CallStack:
    """Return the active call stack of the current thread, innermost first.

    ``skip=0`` starts at the caller of :func:`capture`; every extra unit drops
    one more frame. *limit* caps the number of frames kept.
    """
    start = sys._getframe(skip + 1)
    return CallStack(
        tuple(
            _to_frame(frame, lineno)
            for frame, lineno in islice(traceback.walk_stack(start), limit)
        )
    )
