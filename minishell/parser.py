"""Building commands out of tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from minishell.environ import Environment
from minishell.expander import expand
from minishell.lexer import Token, TokenType, tokenize

_REDIRECTIONS = frozenset(
    {TokenType.RED_IN, TokenType.RED_OUT, TokenType.APPEND, TokenType.HEREDOC}
)


@dataclass
class Redirect:
    """One redirection of a command.

    A here-document carries its delimiter; its file name is filled in once the
    document has been read.
    """

    type: TokenType
    filename: str | None = None
    delimiter: str | None = None


@dataclass
class Command:
    """A simple command: its arguments and redirections."""

    argv: list[str] = field(default_factory=list)
    redirections: list[Redirect] = field(default_factory=list)


def parse_tokens(tokens: Iterable[Token]) -> list[Command]:
    """Group tokens into the commands of a pipeline.

    WORD tokens become arguments, a redirection operator takes the next
    non-blank token as its target when that is a WORD (and drops it
    otherwise), and a pipe ends the current command.
    """
    commands: list[Command] = []
    current: Command | None = None
    stream = iter(tokens)
    for token in stream:
        if current is None:
            current = Command()
        if token.type is TokenType.WORD:
            current.argv.append(token.text)
        elif token.type in _REDIRECTIONS:
            target = next((t for t in stream if t.type is not TokenType.WHITESPACE), None)
            if target is not None and target.type is TokenType.WORD:
                if token.type is TokenType.HEREDOC:
                    current.redirections.append(Redirect(token.type, delimiter=target.text))
                else:
                    current.redirections.append(Redirect(token.type, filename=target.text))
        elif token.type is TokenType.PIPE:
            commands.append(current)
            current = None
    if current is not None:
        commands.append(current)
    return commands


def parse(line: str, environ: Environment | Iterable[str] | None = None) -> list[Command]:
    """Tokenize *line*, expand its variables and return its commands."""
    return parse_tokens(expand(tokenize(line), environ))