"""Split a command line into words and operators."""

from __future__ import annotations

from .tokens import QuoteType, Token, TokenType


class LexerError(ValueError):
    """Raised when a command line cannot be tokenised."""


_OPERATORS = {
    "|": TokenType.PIPE,
    "<": TokenType.REDIR_IN,
    ">": TokenType.REDIR_OUT,
    "<<": TokenType.REDIR_HEREDOC,
    ">>": TokenType.REDIR_APPEND,
}


def is_whitespace(char: str) -> bool:
    """Only spaces and tabs separate tokens."""
    return char in (" ", "\t")


def operator_length(text: str, pos: int) -> int:
    """Length of the operator starting at ``pos``, or 0 if there is none."""
    if pos >= len(text):
        return 0
    char = text[pos]
    if char == "|":
        return 1
    if char in "<>":
        return 2 if text[pos + 1 : pos + 2] == char else 1
    return 0


def operator_type(value: str) -> TokenType:
    """Map an operator string to its token type."""
    try:
        return _OPERATORS[value]
    except KeyError:
        raise LexerError(f"Unknown operator type for '{value}'") from None


def _is_word_char(text: str, pos: int) -> bool:
    return not is_whitespace(text[pos]) and not operator_length(text, pos)


def _read_word(text: str, pos: int) -> tuple[Token | None, int]:
    """Read a word made of quoted and unquoted pieces glued together."""
    parts: list[str] = []
    quote_type = QuoteType.NONE
    end = len(text)
    while pos < end and _is_word_char(text, pos):
        char = text[pos]
        if char in "'\"":
            quote_type = QuoteType.SINGLE if char == "'" else QuoteType.DOUBLE
            close = text.find(char, pos + 1)
            if close == -1:
                raise LexerError("Syntax Error: Unclosed quote")
            parts.append(text[pos + 1 : close])
            pos = close + 1
        else:
            start = pos
            while (
                pos < end
                and text[pos] not in "'\""
                and _is_word_char(text, pos)
            ):
                pos += 1
            parts.append(text[start:pos])
    if not parts:
        return None, pos
    return Token("".join(parts), TokenType.WORD, quote_type), pos


def tokenize(text: str) -> list[Token]:
    """Turn a command line into a list of tokens."""
    tokens: list[Token] = []
    pos = 0
    end = len(text)
    while pos < end:
        while pos < end and is_whitespace(text[pos]):
            pos += 1
        if pos >= end:
            break
        length = operator_length(text, pos)
        if length:
            value = text[pos : pos + length]
            tokens.append(Token(value, operator_type(value)))
            pos += length
        else:
            token, pos = _read_word(text, pos)
            if token is not None:
                tokens.append(token)
    return tokens