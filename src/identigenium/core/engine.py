"""Bijective base-k numeral engine.

Maps a non-negative position onto a string over an alphabet of ``k`` symbols
using a zero-free (bijective) numeral system. The resulting sequence is
length-major and, within one length, ordered by alphabet rank::

    alphabet "ab":  a, b, aa, ab, ba, bb, aaa, ...

Position ``p`` splits into the least-significant digit ``p % k`` and the
super-digit portion ``p // k - 1``, which is rendered the same way one level
up. The ``- 1`` is what removes the zero digit and makes every string reachable
exactly once.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence

from identigenium.core.errors import InvalidAlphabetError, InvalidPositionError

Alphabet = tuple[str, ...]


def validate_alphabet(symbols: str | Sequence[str]) -> Alphabet:
    """Return *symbols* as an order-preserving tuple of single characters.

    Raises:
        InvalidAlphabetError: if the alphabet is empty, holds a symbol that is
            not exactly one character, or repeats a symbol.
    """
    alphabet = tuple(symbols)
    if not isinstance(symbols, str):
        for symbol in alphabet:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise InvalidAlphabetError(
                    f"Alphabet symbols must be single characters, got {symbol!r}"
                )

    if not alphabet:
        raise InvalidAlphabetError("Alphabet must contain at least one symbol")

    if len(set(alphabet)) != len(alphabet):
        duplicates = sorted(s for s, n in Counter(alphabet).items() if n > 1)
        raise InvalidAlphabetError(f"Alphabet contains duplicate symbols: {duplicates}")

    return alphabet


def check_position(position: int) -> int:
    """Validate a sequence position and return it unchanged."""
    if isinstance(position, bool) or not isinstance(position, int):
        raise TypeError(f"Position must be an int, got {type(position).__name__}")
    if position < 0:
        raise InvalidPositionError(f"Position must be non-negative, got {position}")
    return position


def _digits(position: int, base: int) -> list[int]:
    """Split *position* into bijective digits, least significant first."""
    digits = [position % base]
    carry = position // base - 1
    while carry >= 0:
        digits.append(carry % base)
        carry = carry // base - 1
    return digits


def render(position: int, alphabet: str | Sequence[str]) -> str:
    """Return the string at *position* of the bijective sequence over *alphabet*.

    >>> [render(p, "ab") for p in range(7)]
    ['a', 'b', 'aa', 'ab', 'ba', 'bb', 'aaa']
    """
    symbols = validate_alphabet(alphabet)
    check_position(position)
    return "".join(symbols[d] for d in reversed(_digits(position, len(symbols))))


def rank(identifier: str, alphabet: str | Sequence[str]) -> int:
    """Return the position whose rendering is *identifier*.

    Inverse of :func:`render`; useful to resume from the last issued ID when
    only the ID itself was persisted.
    """
    symbols = validate_alphabet(alphabet)
    if not identifier:
        raise InvalidPositionError("Cannot rank an empty identifier")

    index = {symbol: i for i, symbol in enumerate(symbols)}
    base = len(symbols)
    value = 0
    for char in identifier:
        if char not in index:
            raise InvalidPositionError(
                f"Identifier {identifier!r} contains {char!r}, which is not in the alphabet"
            )
        value = value * base + index[char] + 1
    # The digit-plus-one accumulation counts from 1; positions count from 0.
    return value - 1


class SequenceCursor(Iterator[str]):
    """Infinite forward-only iterator over the bijective sequence.

    Holds one digit index per numeral level (least significant first) and
    advances them with a bijective carry, so resuming at a large position
    costs O(log_k position) rather than replaying the prefix of the sequence.

    Parameters
    ----------
    alphabet:
        Symbols in rank order. Validated with :func:`validate_alphabet`.
    start:
        Position rendered by the first ``next()`` call.
    """

    def __init__(self, alphabet: str | Sequence[str], start: int = 0) -> None:
        self._alphabet = validate_alphabet(alphabet)
        self._base = len(self._alphabet)
        self._position = check_position(start)
        self._digits = _digits(start, self._base)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def position(self) -> int:
        """Position that the next ``next()`` call renders."""
        return self._position

    def peek(self) -> str:
        """Render the current position without advancing."""
        return "".join(self._alphabet[d] for d in reversed(self._digits))

    def __iter__(self) -> SequenceCursor:
        return self

    def __next__(self) -> str:
        rendered = self.peek()
        self._advance()
        return rendered

    def _advance(self) -> None:
        top = self._base - 1
        for level, digit in enumerate(self._digits):
            if digit < top:
                self._digits[level] = digit + 1
                break
            self._digits[level] = 0
        else:
            # Every level overflowed: the next length starts at all-lowest symbols.
            self._digits.append(0)
        self._position += 1
