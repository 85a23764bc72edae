"""Checks that reject malformed command lines before they are run."""

from __future__ import annotations

import errno
import os
from collections.abc import Sequence

from .tokens import Token, TokenType

_NEWLINE_MESSAGE = "syntax error near unexpected token `newline'"


class ShellSyntaxError(ValueError):
    """A command line the shell refuses to run."""

    def __init__(self, message: str, exit_status: int = 2) -> None:
        super().__init__(message)
        self.exit_status = exit_status


def _token_at(tokens: Sequence[Token], position: int) -> Token:
    if not 0 <= position < len(tokens):
        raise IndexError("token position out of range")
    return tokens[position]


def last_token_is_redirection(tokens: Sequence[Token]) -> bool:
    """True when the last token is a redirection that is not the first on its line."""
    if not tokens:
        return False
    last = tokens[-1]
    if last.index == 1:
        return False
    return last.is_redirection()


def check_redirection(tokens: Sequence[Token], position: int) -> None:
    """Raise ShellSyntaxError for a misplaced redirection at position.

    A redirection may not be followed by another one, and the line may not
    end on a redirection.
    """
    token = _token_at(tokens, position)
    following = tokens[position + 1] if position + 1 < len(tokens) else None
    if following is not None:
        if token.type is TokenType.INPUT and following.type is TokenType.OUTPUT:
            raise ShellSyntaxError(_NEWLINE_MESSAGE)
        if token.is_redirection() and following.is_redirection():
            raise ShellSyntaxError(
                f"syntax error near unexpected token `{following.text}'"
            )
    if last_token_is_redirection(tokens[position:]):
        raise ShellSyntaxError(_NEWLINE_MESSAGE)


def check_pipe_after_pipe(tokens: Sequence[Token], position: int) -> None:
    """Raise ShellSyntaxError when the pipe at position is followed by a pipe."""
    token = _token_at(tokens, position)
    following = tokens[position + 1] if position + 1 < len(tokens) else None
    if (
        token.type is TokenType.PIPE
        and following is not None
        and following.type is TokenType.PIPE
    ):
        raise ShellSyntaxError("syntax error near unexpected token `||'")


def check_directory_token(text: str) -> None:
    """Raise IsADirectoryError when text names a directory as a command.

    That is an existing directory written as ./path, or any word made only
    of dots and slashes that contains no run of three dots.
    """
    is_directory = text.startswith("./") and os.path.isdir(text)
    if not is_directory and (any(c not in "./" for c in text) or "..." in text):
        return
    raise IsADirectoryError(errno.EISDIR, "Is a directory", text)


def slash_in_command(text: str) -> bool:
    """True when text contains a slash but is not an executable path."""
    return "/" in text and not os.access(text, os.X_OK)