"""Token model shared by the lexer, the syntax checker and the expander."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Kinds of token a command line is split into."""

    WORD = auto()
    PIPE = auto()
    REDIR_IN = auto()
    REDIR_OUT = auto()
    REDIR_APPEND = auto()
    REDIR_HEREDOC = auto()

    def is_redirection(self) -> bool:
        """Return True for the four redirection operators."""
        return self in _REDIRECTIONS


_REDIRECTIONS = frozenset(
    {
        TokenType.REDIR_IN,
        TokenType.REDIR_OUT,
        TokenType.REDIR_APPEND,
        TokenType.REDIR_HEREDOC,
    }
)


class QuoteType(Enum):
    """The last kind of quoting seen inside a word."""

    NONE = auto()
    SINGLE = auto()
    DOUBLE = auto()


@dataclass
class Token:
    """A single lexical token."""

    value: str
    type: TokenType
    quote_type: QuoteType = QuoteType.NONE