"""Token kinds and the small predicates the tokenizer is built on."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable

_BUILTINS = frozenset({"echo", "cd", "pwd", "export", "unset", "env", "exit", "$?"})
_REDIRECTIONS_TEXT = frozenset({"<", "<<", ">", ">>"})
_QUOTES = "\"'"


class TokenType(Enum):
    """Kind of a token on a command line."""

    CMD = auto()
    ARG = auto()
    PIPE = auto()
    INPUT = auto()
    HEREDOC = auto()
    OUTPUT = auto()
    APPEND = auto()


_REDIRECTIONS = frozenset(
    {TokenType.INPUT, TokenType.HEREDOC, TokenType.OUTPUT, TokenType.APPEND}
)
_TEXT_TYPES = {
    "|": TokenType.PIPE,
    "<": TokenType.INPUT,
    "<<": TokenType.HEREDOC,
    ">": TokenType.OUTPUT,
    ">>": TokenType.APPEND,
}


@dataclass
class Token:
    """One token: its unquoted text, kind and 1-based position on the line."""

    text: str
    type: TokenType
    index: int = 1

    def is_redirection(self) -> bool:
        """True for <, <<, > and >> tokens."""
        return self.type in _REDIRECTIONS

    def is_special(self) -> bool:
        """True for redirections and pipes."""
        return self.type in _REDIRECTIONS or self.type is TokenType.PIPE


def token_type(text: str, previous: Token | None) -> TokenType:
    """Classify text given the token before it.

    Operators are recognised by exact text; otherwise a word at the start
    of the line or after a pipe is a command and any other word an argument.
    """
    operator = _TEXT_TYPES.get(text)
    if operator is not None:
        return operator
    if previous is None or previous.type is TokenType.PIPE:
        return TokenType.CMD
    return TokenType.ARG


def special_token_at(text: str) -> TokenType | None:
    """Return the operator that text starts with, or None."""
    if not text:
        return None
    if text[0] == "|":
        return TokenType.PIPE
    if text[0] == "<":
        return TokenType.HEREDOC if text[1:2] == "<" else TokenType.INPUT
    if text[0] == ">":
        return TokenType.APPEND if text[1:2] == ">" else TokenType.OUTPUT
    return None


def is_builtin(name: str | None) -> bool:
    """True when name is handled by the shell itself."""
    return name is not None and name in _BUILTINS


def is_redirection_text(text: str) -> bool:
    """True when text is exactly a redirection operator."""
    return text in _REDIRECTIONS_TEXT


def remove_quotes(text: str) -> str:
    """Drop quote pairs, keeping what they enclose verbatim.

    A quote character inside the other kind of quotes is kept.  An
    unclosed quote is dropped and the rest of the text kept.
    """
    pieces: list[str] = []
    chars = iter(text)
    for char in chars:
        if char in _QUOTES:
            for inner in chars:
                if inner == char:
                    break
                pieces.append(inner)
        else:
            pieces.append(char)
    return "".join(pieces)


def count_pipes(line: str) -> int:
    """Number of pipe characters in line."""
    return line.count("|")


def count_commands(tokens: Iterable[Token]) -> int:
    """Number of command tokens."""
    return sum(1 for token in tokens if token.type is TokenType.CMD)