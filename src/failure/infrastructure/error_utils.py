from __future__ import annotations

import asyncio
import functools
import inspect
import traceback
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

from loguru import logger

from failure.code import Code
from failure.failure import Failure, build_failure
from failure.fields import Field

P = ParamSpec("P")
R = TypeVar("R")


def _raise_site(exc: BaseException) -> str:
    """One line naming the exception and the innermost frame that raised it."""
    detail = "".join(traceback.format_exception_only(exc)).strip()
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return detail
    last = frames[-1]
    return f"{detail} (raised in {last.name} at {last.filename}:{last.lineno})"


def _log_translation(exc: BaseException, code: Code, log: Any) -> None:
    log.opt(exception=exc).error(
        "Translating {} into code({}): {}",
        type(exc).__name__,
        code.error_code(),
        _raise_site(exc),
    )


def log_and_translate(
    exc: BaseException,
    code: Code,
    *fields: Field,
    log: Any = logger,  # loguru logger-like
) -> Failure:
    """Log *exc* with a short traceback and return it translated to *code*."""
    _log_translation(exc, code, log)
    return build_failure(exc, code, fields, skip=1)


def translate_exceptions(
    code: Code, *fields: Field
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator to log exceptions and re-raise them translated to *code*.

    The call stack of the resulting failure starts at the decorated
    callable's caller.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[no-untyped-def]
                try:
                    return await func(*args, **kwargs)
                except asyncio.CancelledError:
                    raise
                except Exception as exc:
                    _log_translation(exc, code, logger)
                    raise build_failure(exc, code, fields, skip=1) from exc

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                _log_translation(exc, code, logger)
                raise build_failure(exc, code, fields, skip=1) from exc

        return sync_wrapper

    return decorator
