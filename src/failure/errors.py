from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(slots=True, eq=False)
class FailureError(Exception):
    """Raised when the failure library itself is used incorrectly.

    These never become part of an error chain. ``code`` is a stable token
    callers can match without parsing ``message``; ``context`` holds the
    offending value or limit.
    """

    message: str
    code: str | None = None
    context: Mapping[str, Any] | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True, eq=False, kw_only=True)
class ChainTooDeep(FailureError):
    """Raised when a chain walk exceeds the configured depth."""

    depth: int
    message: str = field(init=False)
    code: str = field(init=False, default="FAILURE_CHAIN_TOO_DEEP")

    def __post_init__(self) -> None:
        self.message = (
            f"Error chain is deeper than {self.depth} links; it is cyclic or malformed"
        )
        self.context = {"depth": self.depth}


@dataclass(slots=True, eq=False, kw_only=True)
class UnsupportedField(FailureError):
    value: object
    message: str = field(init=False)
    code: str = field(init=False, default="FAILURE_UNSUPPORTED_FIELD")

    def __post_init__(self) -> None:
        self.message = (
            f"Unsupported field {type(self.value).__name__}; expected Message or MessageKV"
        )
        self.context = {"value": repr(self.value)}


@dataclass(slots=True, eq=False, kw_only=True)
class EmptyCallStack(FailureError):
    message: str = field(init=False, default="Call stack must hold at least one frame")
    code: str = field(init=False, default="FAILURE_EMPTY_CALL_STACK")
