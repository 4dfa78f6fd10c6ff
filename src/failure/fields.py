"""Context fields accepted by the chain builders."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from failure.errors import UnsupportedField


@dataclass(frozen=True, slots=True)
class Message:
    """Display text meant for end users."""

    text: str


def messagef(fmt: str, *args: Any) -> Message:
    return Message(fmt % args)


class MessageKV(dict[str, str]):
    """Debug key/value pairs merged into the node's debug map.

    Accepts the same arguments as ``dict``: ``MessageKV({"a": "1"})`` or
    ``MessageKV(a="1")``. Values are stored as strings.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__()
        for key, value in dict(*args, **kwargs).items():
            self[str(key)] = str(value)


Field = Message | MessageKV


@dataclass(frozen=True, slots=True)
class AppliedFields:
    message: str | None = None
    debug: Mapping[str, str] | None = None


def apply_fields(fields: Iterable[Field]) -> AppliedFields:
    """Fold *fields* in order: the last message wins, debug maps merge."""
    message: str | None = None
    debug: dict[str, str] = {}
    for f in fields:
        if isinstance(f, Message):
            message = f.text
        elif isinstance(f, MessageKV):
            debug.update(f)
        else:
            raise UnsupportedField(value=f)
    return AppliedFields(
        message=message,
        debug=MappingProxyType(debug) if debug else None,
    )
