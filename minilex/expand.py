"""Dollar expansion of a command line before it is split into tokens."""

from __future__ import annotations

from collections.abc import Mapping

from .charclass import is_alnum, is_digit
from .strutils import itoa

_WHITESPACE = frozenset(" \t\n\v\f\r")
_QUOTES = ("'", '"')
_END = "\0"


def _char_at(line: str, index: int) -> str:
    return line[index] if index < len(line) else _END


def _expand_dollar(
    line: str,
    index: int,
    out: list[str],
    env: Mapping[str, str | None],
    exit_status: int,
    in_double: bool,
) -> int:
    """Expand the dollar at index into out; return the index to resume at."""
    following = _char_at(line, index + 1)
    after = _char_at(line, index + 2)
    if following == "?":
        out.append(itoa(exit_status))
        return index + 2
    if is_digit(following):
        return index + 2
    if following == "'" and after != "'":
        return index + 1
    if following == '"' and not in_double and after != '"':
        return index + 1
    if (not is_alnum(following) and after not in _QUOTES) or following in _WHITESPACE:
        out.append("$")
        return index + 1
    end = index + 1
    while end < len(line) and is_alnum(line[end]):
        end += 1
    name = line[index + 1:end]
    if name:
        value = env.get(name)
        if value is not None:
            out.append(value)
    return end


def expand(line: str, env: Mapping[str, str | None], exit_status: int = 0) -> str:
    """Replace $NAME, $? and related forms in line.

    Names are runs of ASCII letters and digits.  Undefined names expand to
    nothing, $ followed by a digit drops both, and nothing is expanded
    inside single quotes.  A $ directly before a quote is dropped, and a
    $ that starts no name is kept.  Quotes themselves are left in place.
    """
    out: list[str] = []
    single = double = False
    index = 0
    while index < len(line):
        char = line[index]
        if char == "'":
            single = not single
        elif char == '"':
            double = not double
        if char == "$" and not single and index + 1 < len(line):
            index = _expand_dollar(line, index, out, env, exit_status, double)
        else:
            out.append(char)
            index += 1
    return "".join(out)