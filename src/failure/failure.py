from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import overload

from failure.callstack import CallStack
from failure.code import Code
from failure.config import get_settings
from failure.fields import Field, apply_fields
from failure.infrastructure.stack import capture


class Failure(Exception):
    """One link of an error chain.

    A failure carries at most one code, message, debug map and call stack,
    and points at the error it wraps. Instances are immutable; they are built
    by :func:`new`, :func:`wrap`, :func:`translate`, :func:`custom` and
    :func:`unexpected` rather than directly.
    """

    __slots__ = ("_code", "_message", "_debug", "_call_stack", "_underlying")

    def __init__(
        self,
        *,
        code: Code | None = None,
        message: str | None = None,
        debug: Mapping[str, str] | None = None,
        call_stack: CallStack | None = None,
        underlying: BaseException | None = None,
    ) -> None:
        Exception.__init__(self)
        self._code = code
        self._message = message
        self._debug = None if debug is None else MappingProxyType(dict(debug))
        self._call_stack = call_stack
        self._underlying = underlying
        if isinstance(underlying, BaseException):
            self.__cause__ = underlying

    @property
    def code(self) -> Code | None:
        return self._code

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def debug(self) -> Mapping[str, str] | None:
        return self._debug

    @property
    def call_stack(self) -> CallStack | None:
        return self._call_stack

    @property
    def underlying(self) -> BaseException | None:
        return self._underlying

    def unwrap(self) -> BaseException | None:
        return self._underlying

    def __str__(self) -> str:
        from failure.formatter import short

        return short(self)

    def __reduce__(self) -> tuple[object, ...]:
        debug = None if self._debug is None else dict(self._debug)
        return (
            _restore,
            (self._code, self._message, debug, self._call_stack, self._underlying),
        )

    def __repr__(self) -> str:
        return (
            f"Failure(code={self._code!r}, message={self._message!r}, "
            f"debug={None if self._debug is None else dict(self._debug)!r}, "
            f"underlying={self._underlying!r})"
        )


def _restore(
    code: Code | None,
    message: str | None,
    debug: Mapping[str, str] | None,
    call_stack: CallStack | None,
    underlying: BaseException | None,
) -> Failure:
    return Failure(
        code=code,
        message=message,
        debug=debug,
        call_stack=call_stack,
        underlying=underlying,
    )


def build_failure(
    underlying: BaseException | None,
    code: Code | None,
    fields: tuple[Field, ...],
    *,
    skip: int,
) -> Failure:
    # skip counts library frames between build_failure and the call site.
    applied = apply_fields(fields)
    return Failure(
        code=code,
        message=applied.message,
        debug=applied.debug,
        call_stack=capture(skip=skip + 1, limit=get_settings().stack_limit),
        underlying=underlying,
    )


def new(code: Code, *fields: Field) -> Failure:
    """Create a failure classified by *code* with a call stack at the caller."""
    return build_failure(None, code, fields, skip=1)


@overload
def wrap(err: None, *fields: Field) -> None: ...


@overload
def wrap(err: BaseException, *fields: Field) -> Failure: ...


def wrap(err: BaseException | None, *fields: Field) -> Failure | None:
    """Add call-site provenance and context to *err* without reclassifying it.

    ``wrap(None)`` is ``None`` so call sites can wrap unconditionally.
    """
    if err is None:
        return None
    return build_failure(err, None, fields, skip=1)


@overload
def translate(err: None, code: Code, *fields: Field) -> None: ...


@overload
def translate(err: BaseException, code: Code, *fields: Field) -> Failure: ...


def translate(
    err: BaseException | None, code: Code, *fields: Field
) -> Failure | None:
    """Reclassify *err* under *code*, keeping it as the underlying error."""
    if err is None:
        return None
    return build_failure(err, code, fields, skip=1)


@overload
def custom(err: None) -> None: ...


@overload
def custom(err: BaseException) -> Failure: ...


def custom(err: BaseException | None) -> Failure | None:
    """Adopt a foreign error into a chain without adding anything to it."""
    if err is None:
        return None
    return Failure(underlying=err)


def unexpected(message: str, *fields: Field) -> Failure:
    """Create an unclassified failure around a plain ``Exception(message)``."""
    return build_failure(Exception(message), None, fields, skip=1)
