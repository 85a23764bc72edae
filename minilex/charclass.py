"""ASCII character classification and case mapping.

Every function takes either a one-character string or an integer code,
mirroring the C convention of passing characters as ints.  The case
mappings return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import overload


def _code(char: str | int) -> int:
    if isinstance(char, bool):
        raise TypeError("expected a one-character string or an integer code")
    if isinstance(char, int):
        return char
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected exactly one character")
        return ord(char)
    raise TypeError("expected a one-character string or an integer code")


def _is_upper_code(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower_code(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_digit_code(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def is_alpha(char: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(char)
    return _is_upper_code(code) or _is_lower_code(code)


def is_digit(char: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return _is_digit_code(_code(char))


def is_alnum(char: str | int) -> bool:
    """True for an ASCII letter or decimal digit."""
    code = _code(char)
    return _is_upper_code(code) or _is_lower_code(code) or _is_digit_code(code)


def is_ascii(char: str | int) -> bool:
    """True for a code in the 7-bit ASCII range 0..127."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """True for a printable ASCII character, space through tilde."""
    return 32 <= _code(char) <= 126


@overload
def to_upper(char: str) -> str: ...
@overload
def to_upper(char: int) -> int: ...


def to_upper(char: str | int) -> str | int:
    """Map an ASCII lowercase letter to uppercase; anything else is unchanged."""
    code = _code(char)
    if _is_lower_code(code):
        code -= 32
    return chr(code) if isinstance(char, str) else code


@overload
def to_lower(char: str) -> str: ...
@overload
def to_lower(char: int) -> int: ...


def to_lower(char: str | int) -> str | int:
    """Map an ASCII uppercase letter to lowercase; anything else is unchanged."""
    code = _code(char)
    if _is_upper_code(code):
        code += 32
    return chr(code) if isinstance(char, str) else code