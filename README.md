# minilex

`minilex` turns a shell command line into typed tokens. It expands
`$NAME` and `$?`, splits the line into words and operators, removes
quotes, and checks the result for common syntax errors. The small
string, character, formatting and line-reading helpers it is built on
are included as well.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Tokenizing a line

```python
from minilex.tokenizer import tokenize

tokens = tokenize('echo "$HOME" | grep x > out.txt', {"HOME": "/home/user"}, 0)
for token in tokens:
    print(token.index, token.type, token.text)
```

`tokenize(line, env=None, exit_status=0)` first expands the line when it
contains a `$`, then splits it. A line with an unclosed quote gives an
empty list. Tokens are numbered from 1 in `Token.index`, and their
`text` has the quotes removed.

Each `Token` has a `TokenType`: `CMD` for the first word of the line or
the first word after a pipe, `ARG` for other words, and `PIPE`, `INPUT`
(`<`), `HEREDOC` (`<<`), `OUTPUT` (`>`) and `APPEND` (`>>`) for the
operators. `Token.is_redirection()` is true for the four redirections,
and `Token.is_special()` is true for those and for pipes.

## Expansion

`minilex.expand.expand(line, env, exit_status=0)` rewrites a line:

- `$NAME` becomes the value of `NAME` in `env`. Names are runs of ASCII
  letters and digits, and undefined names expand to nothing.
- `$?` becomes `exit_status`.
- `$` followed by a digit is dropped together with the digit.
- A `$` directly before a quote is dropped.
- A `$` that starts no name is kept.
- Nothing inside single quotes is expanded, and the quote characters
  themselves stay in the line.

## Syntax checks

`minilex.syntax` works on a list of tokens:

- `last_token_is_redirection(tokens)` tells whether the line ends on a
  redirection.
- `check_redirection(tokens, position)` raises `ShellSyntaxError` when
  the redirection at `position` is followed by another redirection, or
  when the line ends on a redirection.
- `check_pipe_after_pipe(tokens, position)` raises `ShellSyntaxError`
  when the pipe at `position` is followed by a second pipe.

`ShellSyntaxError` is a `ValueError`. It carries the message a shell
prints and an `exit_status` of 2.

Two checks apply to a command word:

- `check_directory_token(text)` raises `IsADirectoryError` when the word
  names an existing directory written as `./path`. It also raises for a
  word made only of dots and slashes that has no run of three dots.
- `slash_in_command(text)` is true when the word contains a slash but is
  not an executable path.

## Helpers

- `minilex.tokens`: `token_type`, `special_token_at`, `is_builtin`,
  `is_redirection_text`, `remove_quotes`, `count_pipes` and
  `count_commands`.
- `minilex.strutils`: string routines with C library semantics.
  - `atoi`, `itoa`, `split` and `strtrim`.
  - `substr`.
  - `strnstr` and `strstr`, which return an index or `None`.
  - `strcmp`, `strncmp` and `memcmp`, which return a signed difference.
  - `strlcpy` and `strlcat`, which return the resulting text together
    with the length the routine reports.
- `minilex.charclass`: `is_alnum`, `is_alpha`, `is_digit`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower`. Each takes a one-character
  string or an integer code.
- `minilex.printf`: `format_printf(template, *args)` returns the
  rendered text for the `%c %s %p %d %i %u %x %X %%` conversions, with
  32-bit integer wrapping. `printf(template, *args, file=None)` writes
  that text to `file`, or to stdout when no file is given, and returns
  how many characters it wrote.
- `minilex.linereader`: `LineReader(stream, buffer_size=42)` reads lines
  from a text or binary stream in fixed-size chunks. Use `readline()`,
  or iterate over the reader.

## What it does not do

`minilex` only analyses command lines. It has no interactive prompt and
no command to start one. It does not run commands or pipelines,
implement built-in commands, open files for redirections, or read
here-documents. `is_builtin` only reports whether a name is one the
shell would handle itself.