"""Coercion of command-line tokens to booleans."""

import click

# Compared against the lowercased token, so an uppercase "T" can never match.
TRUE_TOKENS = frozenset({"1", "true", "yes"})


def string_to_bool(value: str) -> bool:
    """Figure out whether a user supplied token means true.

    Surrounding whitespace is trimmed and case is ignored. Anything that
    is not one of ``TRUE_TOKENS`` is False, including the empty string.
    """
    return value.strip().lower() in TRUE_TOKENS


class BoolToken(click.ParamType):
    """Click parameter type that coerces with ``string_to_bool``.

    Unlike ``click.BOOL`` it never rejects a value.
    """

    name = "bool"

    def convert(self, value, param, ctx):
        if isinstance(value, bool):
            return value
        return string_to_bool(str(value))


BOOL_TOKEN = BoolToken()
