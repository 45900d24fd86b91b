"""Environment variable expansion for word tokens."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from .tokens import QuoteType, Token

_LAST_STATUS = "10"


def _environment(env: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if env is None else env


def _is_name_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char == "_"


def expand_variable(
    text: str, pos: int, env: Mapping[str, str] | None = None
) -> tuple[str, int]:
    """Expand the variable name starting at ``pos`` (just after ``$``).

    Returns the value and the position after the name.
    """
    if text[pos : pos + 1] == "?":
        return _LAST_STATUS, pos + 1
    end = pos
    while end < len(text) and _is_name_char(text[end]):
        end += 1
    name = text[pos:end]
    return _environment(env).get(name, "") if name else "", end


def perform_expansion(
    text: str, quote_type: QuoteType, env: Mapping[str, str] | None = None
) -> str:
    """Replace every ``$name`` in ``text`` unless it was single-quoted."""
    if quote_type is QuoteType.SINGLE:
        return text
    parts: list[str] = []
    pos = 0
    while pos < len(text):
        dollar = text.find("$", pos)
        if dollar == -1:
            parts.append(text[pos:])
            break
        parts.append(text[pos:dollar])
        value, pos = expand_variable(text, dollar + 1, env)
        parts.append(value)
    return "".join(parts)


def expand_tokens(tokens: Iterable[Token], env: Mapping[str, str] | None = None) -> None:
    """Expand variables in place in every token that is not single-quoted."""
    for token in tokens:
        if token.quote_type is not QuoteType.SINGLE and "$" in token.value:
            token.value = perform_expansion(token.value, token.quote_type, env)