"""Decode captured editor output into Python values.

The lookup expression encodes an undefined variable as the integer ``0``, so
a literal ``0`` is reported as absent unless the caller allows zero. Other
falsy values (``false``, ``""``, ``0.0``, ``null``) are always present.

Example:
    >>> decode('"some value"\\n')
    'some value'
    >>> decode("0") is None
    True
    >>> decode("0", allow_zero=True)
    0
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import ConversionError, MalformedOutputError
from .models import JsonValue

T = TypeVar("T")


@dataclass(frozen=True)
class Lookup:
    """Decoded lookup outcome; ``value`` is meaningful only when ``present``."""

    present: bool
    value: JsonValue = None


ABSENT = Lookup(present=False)


def _parse(text: str) -> Any:
    raw = text.strip()
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedOutputError(raw, str(exc)) from exc


def _is_absent_sentinel(value: Any, allow_zero: bool) -> bool:
    # bool is an int subclass; only the integer 0 is the sentinel.
    return not allow_zero and type(value) is int and value == 0


def decode_outcome(text: str, allow_zero: bool = False) -> Lookup:
    """Decode ``text`` into a ``Lookup`` that separates ``null`` from absence.

    Example:
        >>> decode_outcome("null")
        Lookup(present=True, value=None)
        >>> decode_outcome("0")
        Lookup(present=False, value=None)
    """
    value = _parse(text)
    if _is_absent_sentinel(value, allow_zero):
        return ABSENT
    return Lookup(present=True, value=value)


def decode(text: str, allow_zero: bool = False) -> JsonValue:
    """Decode ``text`` as JSON, returning ``None`` for an absent variable.

    Args:
        text: Captured editor output.
        allow_zero: Treat a literal ``0`` as a real value.

    Returns:
        The decoded JSON value, or ``None`` when absent.

    Raises:
        MalformedOutputError: ``text`` is not valid JSON.
    """
    return decode_outcome(text, allow_zero).value


def decode_typed(text: str, target: type[T], allow_zero: bool = False) -> T | None:
    """Decode ``text`` and validate it as ``target``.

    Validation is strict: ``"5"`` does not become ``5``.

    Args:
        text: Captured editor output.
        target: Any type Pydantic can validate (builtins, ``list[int]``,
            ``typing_extensions.TypedDict``, models, ...). Below Python 3.12
            Pydantic rejects ``typing.TypedDict``.
        allow_zero: Treat a literal ``0`` as a real value.

    Returns:
        The validated value, or ``None`` when absent.

    Raises:
        MalformedOutputError: ``text`` is not valid JSON.
        ConversionError: The value does not match ``target``.

    Example:
        >>> decode_typed("[1, 2]", list[int])
        [1, 2]
    """
    outcome = decode_outcome(text, allow_zero)
    if not outcome.present:
        return None
    try:
        return TypeAdapter(target).validate_json(text.strip(), strict=True)
    except ValidationError as exc:
        raise ConversionError(
            f"failed to convert {text.strip()!r} to {_type_name(target)}: {exc}"
        ) from exc


def _type_name(target: object) -> str:
    return getattr(target, "__name__", None) or repr(target)
