from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import overload

from failure.errors import EmptyCallStack


@dataclass(frozen=True, slots=True)
class Frame:
    """One call site: qualified function name, source path and line."""

    function: str
    path: str
    line: int
    module: str = ""

    @property
    def pkg(self) -> str:
        return self.module.rpartition(".")[2]

    @property
    def func_name(self) -> str:
        if not self.pkg:
            return self.function
        return f"{self.pkg}.{self.function}"

    def __str__(self) -> str:
        return f"[{self.func_name}] {self.path}:{self.line}"


@dataclass(frozen=True, slots=True)
class CallStack:
    """Immutable, non-empty sequence of frames, innermost first."""

    frames: tuple[Frame, ...]

    def __post_init__(self) -> None:
        frames = tuple(self.frames)
        if not frames:
            raise EmptyCallStack()
        object.__setattr__(self, "frames", frames)

    @property
    def head_frame(self) -> Frame:
        return self.frames[0]

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)

    @overload
    def __getitem__(self, index: int) -> Frame: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Frame, ...]: ...

    def __getitem__(self, index: int | slice) -> Frame | tuple[Frame, ...]:
        return self.frames[index]

    def __repr__(self) -> str:
        return f"CallStack(head={self.head_frame!s}, depth={len(self)})"
