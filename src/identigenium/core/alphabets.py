"""Predefined symbol tables that can be passed as an ``alphabet``."""

from __future__ import annotations

from identigenium.core.errors import InvalidAlphabetError

UPPER_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER_CHARS = "abcdefghijklmnopqrstuvwxyz"
CHARS = LOWER_CHARS + UPPER_CHARS

NUMBERS = "0123456789"
ALPHA_NUMERIC = CHARS + NUMBERS

BASE64 = ALPHA_NUMERIC + "+/"
BASE64_URL = ALPHA_NUMERIC + "-_"

BRACES = "<{[()]}>"
SLASHES = "\\/"
SEPARATORS = ",.:;?!"
QUOTES = "'\""
MISCELLANEOUS = "@#%$|^~_+-*="
SPECIAL_CHARS = BRACES + SLASHES + SEPARATORS + QUOTES + MISCELLANEOUS

# Tables the config loader accepts by name through `alphabet_name`.
NAMED_ALPHABETS: dict[str, str] = {
    "upper": UPPER_CHARS,
    "lower": LOWER_CHARS,
    "chars": CHARS,
    "numbers": NUMBERS,
    "alphanumeric": ALPHA_NUMERIC,
    "base64": BASE64,
    "base64url": BASE64_URL,
    "special": SPECIAL_CHARS,
}


def resolve_alphabet(name: str) -> str:
    """Return the registered table called *name* (case-insensitive).

    Raises:
        InvalidAlphabetError: if no table is registered under *name*.
    """
    try:
        return NAMED_ALPHABETS[name.lower()]
    except KeyError:
        raise InvalidAlphabetError(
            f"Unknown alphabet name {name!r}. Available: {sorted(NAMED_ALPHABETS)}"
        ) from None
