"""Opening the files a command's redirections name, here-documents included."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from typing import IO, Callable, Iterable

from minishell.lexer import TokenType
from minishell.parser import Redirect

ReadLine = Callable[[str], "str | None"]


class RedirectionError(Exception):
    """A redirection could not be set up."""


def _prompt(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


@dataclass
class Streams:
    """The input and output a command's redirections replace, if any."""

    stdin: IO[str] | None = None
    stdout: IO[str] | None = None

    def close(self) -> None:
        """Close whichever streams are open."""
        for stream in (self.stdin, self.stdout):
            if stream is not None:
                stream.close()

    def __enter__(self) -> Streams:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def read_heredoc(delimiter: str | None, read_line: ReadLine | None = None) -> str:
    """Read lines up to *delimiter* or end of input and return them joined.

    Each line read keeps a trailing newline. An interrupt while reading
    raises RedirectionError.
    """
    read = read_line or _prompt
    lines: list[str] = []
    while True:
        try:
            line = read("> ")
        except KeyboardInterrupt as exc:
            raise RedirectionError("here-document interrupted") from exc
        if line is None or line == delimiter:
            break
        lines.append(f"{line}\n")
    return "".join(lines)


def _document(text: str) -> IO[str]:
    document = tempfile.TemporaryFile("w+")
    document.write(text)
    document.flush()
    document.seek(0)
    return document


def _open(redirect: Redirect, mode: str) -> IO[str]:
    if redirect.filename is None:
        raise RedirectionError("redirection without a file name")
    return open(redirect.filename, mode)


def open_redirections(
    redirections: Iterable[Redirect], read_line: ReadLine | None = None
) -> Streams:
    """Open every redirection in order and return the streams that win.

    Each later input replaces an earlier one and likewise for output; output
    files are still created or truncated even when a later one wins.
    """
    streams = Streams()
    try:
        for redirect in redirections:
            if redirect.type is TokenType.HEREDOC:
                opened = _document(read_heredoc(redirect.delimiter, read_line))
            elif redirect.type is TokenType.RED_IN:
                opened = _open(redirect, "r")
            elif redirect.type is TokenType.RED_OUT:
                opened = _open(redirect, "w")
            elif redirect.type is TokenType.APPEND:
                opened = _open(redirect, "a")
            else:
                continue
            if redirect.type in (TokenType.HEREDOC, TokenType.RED_IN):
                if streams.stdin is not None:
                    streams.stdin.close()
                streams.stdin = opened
            else:
                if streams.stdout is not None:
                    streams.stdout.close()
                streams.stdout = opened
    except OSError as exc:
        streams.close()
        raise RedirectionError(str(exc)) from exc
    except RedirectionError:
        streams.close()
        raise
    return streams