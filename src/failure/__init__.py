"""Structured, chainable application errors.

Build chains with :func:`new`, :func:`wrap`, :func:`translate`,
:func:`custom` and :func:`unexpected`; read them back with the ``*_of``
queries; render them with :func:`short` and :func:`verbose`.
"""

from failure.callstack import CallStack, Frame
from failure.code import Code, IntCode, StringCode
from failure.config import Settings, get_settings
from failure.errors import ChainTooDeep, EmptyCallStack, FailureError, UnsupportedField
from failure.failure import Failure, custom, new, translate, unexpected, wrap
from failure.fields import Field, Message, MessageKV, messagef
from failure.formatter import short, verbose
from failure.infrastructure.error_utils import log_and_translate, translate_exceptions
from failure.query import (
    call_stack_of,
    cause_of,
    code_of,
    debugs_of,
    is_code,
    message_of,
)
from failure.walker import Unwrapper, walk

__all__ = [
    "CallStack",
    "ChainTooDeep",
    "Code",
    "EmptyCallStack",
    "Failure",
    "FailureError",
    "Field",
    "Frame",
    "IntCode",
    "Message",
    "MessageKV",
    "Settings",
    "StringCode",
    "UnsupportedField",
    "Unwrapper",
    "call_stack_of",
    "cause_of",
    "code_of",
    "custom",
    "debugs_of",
    "get_settings",
    "is_code",
    "log_and_translate",
    "message_of",
    "messagef",
    "new",
    "short",
    "translate",
    "translate_exceptions",
    "unexpected",
    "verbose",
    "walk",
    "wrap",
]
