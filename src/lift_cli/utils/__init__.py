"""Utility helpers for lift."""

from .booleans import BOOL_TOKEN, TRUE_TOKENS, string_to_bool

__all__ = ["BOOL_TOKEN", "TRUE_TOKENS", "string_to_bool"]
