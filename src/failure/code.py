from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Code(Protocol):
    """Classification token attached to a failure.

    Any hashable value comparable for equality can be a code as long as it
    renders itself as a short printable token.
    """

    def error_code(self) -> str:  # pragma: no cover - protocol definition
        """Return the token shown inside ``code(...)``."""


@dataclass(frozen=True, slots=True)
class StringCode:
    value: str

    def error_code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class IntCode:
    value: int

    def error_code(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return str(self.value)
