"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator, TextIO

_INT_BITS = 32
_POINTER_MASK = (1 << 64) - 1
_UNSIGNED_MASK = (1 << _INT_BITS) - 1


def _as_int(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"%{spec} requires an integer argument") from None


def _to_int32(value: int) -> int:
    value &= _UNSIGNED_MASK
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c requires a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _as_int(value, "p") & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _format_signed(value: Any) -> str:
    return str(_to_int32(_as_int(value, "d")))


def _format_unsigned(value: Any) -> str:
    return str(_as_int(value, "u") & _UNSIGNED_MASK)


def _format_hex_lower(value: Any) -> str:
    return format(_as_int(value, "x") & _UNSIGNED_MASK, "x")


def _format_hex_upper(value: Any) -> str:
    return format(_as_int(value, "X") & _UNSIGNED_MASK, "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def _next_argument(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_printf(template: str, *args: Any) -> str:
    """Render template with args.

    Integers follow 32-bit C semantics (%d wraps to signed, %u/%x/%X to
    unsigned).  An unknown conversion and its character are dropped, as is
    a lone trailing percent sign.  Too few arguments raise TypeError.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_argument(values, spec)))
    return "".join(pieces)


def printf(template: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the rendered template to file (stdout by default).

    Returns the number of characters written.
    """
    text = format_printf(template, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)