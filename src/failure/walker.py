"""Traversal over chains of possibly heterogeneous errors."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from loguru import logger

from failure.config import get_settings
from failure.errors import ChainTooDeep


@runtime_checkable
class Unwrapper(Protocol):
    """An error exposing the single error it wraps."""

    def unwrap(self) -> BaseException | None:  # pragma: no cover - protocol definition
        """Return the wrapped error, or ``None`` at the end of the chain."""


def next_link(err: BaseException) -> BaseException | None:
    """Return the error *err* wraps.

    ``unwrap()`` takes precedence; otherwise the explicit ``raise ... from``
    link is followed. Implicit ``__context__`` never is.
    """
    if isinstance(err, Unwrapper):
        return err.unwrap()
    return getattr(err, "__cause__", None)


def walk(
    err: BaseException | None, *, max_depth: int | None = None
) -> Iterator[BaseException]:
    """Yield *err* and every error it wraps, outermost first.

    Raises:
        ChainTooDeep: more than *max_depth* errors were reached.
    """
    if max_depth is None:
        max_depth = get_settings().max_depth
    depth = 0
    while err is not None:
        if depth >= max_depth:
            logger.critical(
                "Error chain exceeded {} links at {}", max_depth, type(err).__name__
            )
            raise ChainTooDeep(depth=max_depth)
        depth += 1
        yield err
        err = next_link(err)
