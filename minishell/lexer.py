"""Splitting a command line into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class TokenType(IntEnum):
    """Kinds of token a command line is made of."""

    WORD = 0
    PIPE = 1
    RED_IN = 2
    RED_OUT = 3
    APPEND = 4
    SQUOTE = 5
    DQUOTE = 6
    WHITESPACE = 7
    HEREDOC = 8
    NEW_LINE = 9
    ENV = 10


class QuoteState(Enum):
    """Quoting context a token was read in."""

    GENERAL = "general"
    IN_DQUOTE = "in_dquote"
    IN_SQUOTE = "in_squote"


@dataclass(frozen=True)
class Token:
    """One lexical token with the quoting context it was read in."""

    text: str
    type: TokenType
    state: QuoteState = QuoteState.GENERAL


_SPACES = frozenset(" \t\n")
_SPECIALS = frozenset("|<>\n'\"$")
_QUOTES = {
    '"': (TokenType.DQUOTE, QuoteState.IN_DQUOTE),
    "'": (TokenType.SQUOTE, QuoteState.IN_SQUOTE),
}


def is_space(c: str) -> bool:
    """True for a space, tab or newline."""
    return c in _SPACES


def is_special(c: str) -> bool:
    """True for a character that ends a word."""
    return c in _SPECIALS or is_space(c)


def word_length(text: str) -> int:
    """Number of leading characters of *text* that are not special."""
    for index, char in enumerate(text):
        if is_special(char):
            return index
    return len(text)


def _quote(char: str, state: QuoteState, tokens: list[Token]) -> QuoteState:
    """Record a quote character and return the quoting state that follows it."""
    token_type, inside = _QUOTES[char]
    if state is inside:
        tokens.append(Token(char, token_type, QuoteState.GENERAL))
        return QuoteState.GENERAL
    tokens.append(Token(char, token_type, state))
    if state is QuoteState.GENERAL:
        return inside
    return state


def tokenize(text: str) -> list[Token]:
    """Split *text* into tokens.

    Each whitespace character becomes its own ``" "`` token, quote characters
    are kept as tokens and switch the quoting state, ``$name`` becomes an ENV
    token, and runs of ordinary characters become WORD tokens.
    """
    tokens: list[Token] = []
    state = QuoteState.GENERAL
    pos = 0
    while pos < len(text):
        char = text[pos]
        following = text[pos + 1:pos + 2]
        if not is_special(char):
            length = word_length(text[pos:])
            tokens.append(Token(text[pos:pos + length], TokenType.WORD, state))
            pos += length
            continue
        if char == "|":
            tokens.append(Token("|", TokenType.PIPE, state))
        elif is_space(char):
            tokens.append(Token(" ", TokenType.WHITESPACE, state))
        elif char in _QUOTES:
            state = _quote(char, state, tokens)
        elif char == ">" and following == ">":
            tokens.append(Token(">>", TokenType.APPEND, state))
            pos += 1
        elif char == "<" and following == "<":
            tokens.append(Token("<<", TokenType.HEREDOC, state))
            pos += 1
        elif char == ">":
            tokens.append(Token(">", TokenType.RED_OUT, state))
        elif char == "<":
            tokens.append(Token("<", TokenType.RED_IN, state))
        elif char == "$":
            if following == "?":
                tokens.append(Token("$?", TokenType.ENV, state))
            else:
                length = word_length(text[pos + 1:])
                tokens.append(Token(text[pos:pos + 1 + length], TokenType.ENV, state))
                pos += length
        pos += 1
    return tokens