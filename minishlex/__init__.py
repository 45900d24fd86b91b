"""Tokenizer, syntax checker and variable expansion for a small shell."""

__version__ = "0.1.0"

__all__ = ["__version__"]