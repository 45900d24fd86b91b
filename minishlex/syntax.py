"""Grammar checks on a token list before it is parsed."""

from __future__ import annotations

from collections.abc import Sequence

from .tokens import Token, TokenType


class ShellSyntaxError(ValueError):
    """Raised when a token list does not form a valid command line."""


def check_syntax(tokens: Sequence[Token]) -> Sequence[Token]:
    """Validate pipes and redirections; return the tokens unchanged."""
    if not tokens:
        return tokens
    if tokens[0].type is TokenType.PIPE:
        raise ShellSyntaxError("Syntax error: unexpected token '|' at start")
    found_command = False
    for token, following in zip(tokens, [*tokens[1:], None]):
        if token.type is TokenType.PIPE:
            if following is None:
                raise ShellSyntaxError("Syntax error: unexpected token '|' at end")
            if following.type is TokenType.PIPE:
                raise ShellSyntaxError("Syntax error: consecutive '|'")
            if not found_command:
                raise ShellSyntaxError("Syntax error: empty command before '|'")
            found_command = False
        elif token.type.is_redirection():
            if following is None or following.type is not TokenType.WORD:
                raise ShellSyntaxError("Syntax error: redirection missing filename")
        elif token.type is TokenType.WORD:
            found_command = True
    return tokens