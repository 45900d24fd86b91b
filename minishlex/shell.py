"""Helpers for running commands: executable lookup and token dumps."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .tokens import Token


def find_path(command: str, path: str) -> str | None:
    """Return the first ``dir/command`` that exists on the ``:``-separated path."""
    for directory in filter(None, path.split(":")):
        candidate = f"{directory}/{command}"
        if os.path.exists(candidate):
            return candidate
    return None


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render a token list as a human-readable listing."""
    lines = ["--- Tokens ---"]
    lines.extend(
        f"Token {pos}: Type={token.type.name}, Value={token.value}, "
        f"Quote={token.quote_type.name}"
        for pos, token in enumerate(tokens)
    )
    lines.append("--------------")
    return "\n".join(lines) + "\n"