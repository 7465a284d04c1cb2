"""Replacing variable references with their values."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from minishell.environ import Environment
from minishell.lexer import QuoteState, Token, TokenType


def _entries(environ: Environment | Iterable[str] | None) -> list[str]:
    if environ is None:
        environ = Environment()
    if isinstance(environ, Environment):
        return environ.entries()
    return list(environ)


def lookup(name: str, environ: Environment | Iterable[str] | None) -> str | None:
    """Return the value of *name* among ``NAME=value`` entries, or None."""
    if not name:
        return None
    prefix = f"{name}="
    for entry in _entries(environ):
        if entry.startswith(prefix):
            return entry[len(prefix):]
    return None


def expand(tokens: Iterable[Token], environ: Environment | Iterable[str] | None) -> list[Token]:
    """Return the tokens with every variable outside single quotes replaced.

    A replaced variable becomes a WORD token holding its value; a variable
    that is not set expands to the empty string. The input is not changed.
    """
    entries = _entries(environ)
    result: list[Token] = []
    for token in tokens:
        if token.type is TokenType.ENV and token.state is not QuoteState.IN_SQUOTE:
            value = lookup(token.text[1:], entries)
            token = replace(token, text=value or "", type=TokenType.WORD)
        result.append(token)
    return result