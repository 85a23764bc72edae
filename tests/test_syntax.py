import os
import re

import pytest

from minilex.syntax import (
    ShellSyntaxError,
    check_directory_token,
    check_pipe_after_pipe,
    check_redirection,
    last_token_is_redirection,
    slash_in_command,
)
from minilex.tokenizer import tokenize

NEWLINE = "syntax error near unexpected token `newline'"


def test_last_token_redirection_detected():
    assert last_token_is_redirection(tokenize("ls >")) is True


def test_lone_redirection_is_not_counted():
    assert last_token_is_redirection(tokenize(">")) is False


@pytest.mark.parametrize("line", ["", "ls", "cat < in"])
def test_no_trailing_redirection(line):
    assert last_token_is_redirection(tokenize(line)) is False


def test_input_then_output_reports_newline():
    tokens = tokenize("cat < > out")
    with pytest.raises(ShellSyntaxError, match=re.escape(NEWLINE)) as info:
        check_redirection(tokens, 1)
    assert info.value.exit_status == 2


def test_redirection_followed_by_redirection_names_it():
    tokens = tokenize("cat > < f")
    with pytest.raises(ShellSyntaxError, match=re.escape("`<'")):
        check_redirection(tokens, 1)


def test_trailing_redirection_raises_from_any_position():
    tokens = tokenize("ls >")
    with pytest.raises(ShellSyntaxError, match=re.escape(NEWLINE)):
        check_redirection(tokens, 0)


def test_valid_redirections_pass():
    tokens = tokenize("cat < in > out")
    assert [check_redirection(tokens, i) for i in range(len(tokens))] == [None] * len(tokens)


def test_position_out_of_range():
    with pytest.raises(IndexError):
        check_redirection(tokenize("ls"), 3)


def test_double_pipe_rejected():
    tokens = tokenize("ls | | wc")
    with pytest.raises(ShellSyntaxError, match=re.escape("`||'")) as info:
        check_pipe_after_pipe(tokens, 1)
    assert info.value.exit_status == 2


def test_single_pipe_accepted():
    tokens = tokenize("ls | wc")
    assert check_pipe_after_pipe(tokens, 1) is None


@pytest.mark.parametrize("text", [".", "..", "/", "../", "./"])
def test_dot_and_slash_words_are_directories(text):
    with pytest.raises(IsADirectoryError) as info:
        check_directory_token(text)
    assert info.value.filename == text


def test_existing_relative_directory(tmp_path, monkeypatch):
    (tmp_path / "sub").mkdir()
    monkeypatch.chdir(tmp_path)
    with pytest.raises(IsADirectoryError) as info:
        check_directory_token("./sub")
    assert info.value.strerror == "Is a directory"


@pytest.mark.parametrize("text", ["...", "ls", "./missing-entry"])
def test_non_directories_pass(text, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert check_directory_token(text) is None


def test_slash_in_missing_path(tmp_path):
    assert slash_in_command(str(tmp_path / "absent")) is True


def test_slash_in_executable_path(tmp_path):
    program = tmp_path / "run"
    program.write_text("#!/bin/sh\n")
    os.chmod(program, 0o755)
    assert slash_in_command(str(program)) is False


def test_no_slash_is_fine():
    assert slash_in_command("ls") is False