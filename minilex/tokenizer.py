"""Splitting a command line into typed tokens."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .expand import expand
from .tokens import Token, TokenType, remove_quotes, special_token_at, token_type

_WHITESPACE = frozenset(" \t\n\v\f\r")
_QUOTES = frozenset("'\"")
_OPERATORS = frozenset("|<>")
_OPERATOR_TEXT = {
    TokenType.PIPE: "|",
    TokenType.INPUT: "<",
    TokenType.OUTPUT: ">",
    TokenType.HEREDOC: "<<",
    TokenType.APPEND: ">>",
}


def _quotes_closed(line: str) -> bool:
    open_quote: str | None = None
    for char in line:
        if open_quote is None:
            if char in _QUOTES:
                open_quote = char
        elif char == open_quote:
            open_quote = None
    return open_quote is None


def _skip_plain(line: str, end: int) -> int:
    while end < len(line):
        char = line[end]
        if char in _WHITESPACE or char in _OPERATORS or char in _QUOTES:
            break
        end += 1
    return end


def _skip_quoted(line: str, end: int) -> int:
    quote = line[end]
    end += 1
    while end < len(line) and line[end] != quote:
        end += 1
    if end < len(line):
        end += 1
    while end < len(line) and line[end] not in _WHITESPACE:
        end += 1
    return end


def _split_words(line: str) -> Iterator[str]:
    """Yield the raw words and operators of line, quotes still in place."""
    end = 0
    while end < len(line):
        while end < len(line) and line[end] in _WHITESPACE:
            end += 1
        start = end
        if end < len(line) and line[end] in _QUOTES:
            end = _skip_quoted(line, end)
        else:
            end = _skip_plain(line, end)
            if end < len(line) and line[end] in _QUOTES:
                end = _skip_quoted(line, end)
            end = _skip_plain(line, end)
        if start != end:
            yield line[start:end]
        operator = special_token_at(line[end:])
        if operator is not None:
            text = _OPERATOR_TEXT[operator]
            yield text
            end += len(text)


def tokenize(
    line: str,
    env: Mapping[str, str | None] | None = None,
    exit_status: int = 0,
) -> list[Token]:
    """Expand and split line into tokens numbered from 1.

    A line with an unclosed quote gives no tokens.  A word that starts
    with a quote runs to the next whitespace, operators included.
    """
    if "$" in line:
        line = expand(line, env or {}, exit_status)
    if not _quotes_closed(line):
        return []
    tokens: list[Token] = []
    for word in _split_words(line):
        text = remove_quotes(word)
        previous = tokens[-1] if tokens else None
        tokens.append(Token(text, token_type(text, previous), len(tokens) + 1))
    return tokens