"""ID providers built on the bijective sequence engine.

Two strategies share the :class:`IDSource` contract:

``IncrementalIDProvider``
    Always starts at position 0 and offers no way to jump.
``ConfigurableIDProvider``
    Exposes its position for reading and writing so a caller can persist
    progress and resume later without replaying the sequence.

Neither provider is thread-safe. Callers sharing one instance between threads
must serialize ``generate_id`` and position assignment themselves.
"""

from __future__ import annotations

import logging
from abc import ABC
from collections.abc import Iterator, Sequence

from identigenium.core.engine import SequenceCursor, check_position, validate_alphabet
from identigenium.core.models import ProviderConfig

logger = logging.getLogger(__name__)


class IdStream(Iterator[str]):
    """Prefixed view over a :class:`SequenceCursor`.

    This is the single iterator a provider owns; ``generate_id`` and direct
    iteration both pull from it, so they never diverge.
    """

    def __init__(self, cursor: SequenceCursor, prefix: str = "") -> None:
        self._cursor = cursor
        self._prefix = prefix

    @property
    def position(self) -> int:
        return self._cursor.position

    def peek(self) -> str:
        return self._prefix + self._cursor.peek()

    def __iter__(self) -> IdStream:
        return self

    def __next__(self) -> str:
        return self._prefix + next(self._cursor)


class IDSource(ABC):
    """Common contract of every provider.

    ``id_stream`` is an infinite iterator of IDs and ``generate_id`` is
    ``next(id_stream)``. Iterating the provider itself walks the same stream::

        for id_ in provider:
            ...
    """

    _stream: IdStream

    def __init__(self, alphabet: str | Sequence[str], prefix: str = "") -> None:
        self._alphabet = validate_alphabet(alphabet)
        self._prefix = prefix

    @property
    def alphabet(self) -> tuple[str, ...]:
        return self._alphabet

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def id_stream(self) -> IdStream:
        return self._stream

    def generate_id(self) -> str:
        """Return the next ID and advance by one."""
        return next(self._stream)

    def __iter__(self) -> IdStream:
        return self._stream

    def _open_stream(self, start: int) -> IdStream:
        return IdStream(SequenceCursor(self._alphabet, start), self._prefix)


class IncrementalIDProvider(IDSource):
    """Generates IDs from the first symbol onward, with an optional prefix.

    >>> provider = IncrementalIDProvider("ab")
    >>> [provider.generate_id() for _ in range(4)]
    ['a', 'b', 'aa', 'ab']
    """

    def __init__(self, alphabet: str | Sequence[str], prefix: str = "") -> None:
        super().__init__(alphabet, prefix)
        self._stream = self._open_stream(0)


class ConfigurableIDProvider(IDSource):
    """ID provider whose position can be read and reassigned.

    Parameters
    ----------
    alphabet:
        Distinct symbols in rank order.
    start_position:
        Position rendered by the first :meth:`generate_id` call.
    prefix:
        Prepended to every ID; has no effect on ordering.

    After ``n`` calls to :meth:`generate_id`, :attr:`position` equals
    ``start_position + n``. Assigning :attr:`position` rebuilds the stream so
    the next ID is exactly the one a fresh provider started there would give.
    """

    def __init__(
        self,
        alphabet: str | Sequence[str],
        start_position: int = 0,
        prefix: str = "",
    ) -> None:
        super().__init__(alphabet, prefix)
        self._stream = self._open_stream(check_position(start_position))
        logger.debug(
            "Created ID provider at position %d (alphabet size %d)",
            start_position,
            len(self._alphabet),
        )

    @classmethod
    def from_config(cls, config: ProviderConfig) -> ConfigurableIDProvider:
        return cls(config.alphabet, config.start_position, config.prefix)

    @property
    def position(self) -> int:
        """Next position to be rendered."""
        return self._stream.position

    @position.setter
    def position(self, value: int) -> None:
        self.set_position(value)

    def set_position(self, position: int) -> None:
        """Resume generation at *position*.

        Moving backwards is allowed but logs a warning, since IDs already
        handed out will be issued again. Invalid positions raise before any
        state changes.
        """
        check_position(position)
        current = self._stream.position
        if position < current:
            logger.warning(
                "Setting ID position to %d, below current position %d. "
                "Risk of duplicate ID generation.",
                position,
                current,
            )
        self._stream = self._open_stream(position)
        logger.debug("ID position reset from %d to %d", current, position)

    def peek(self) -> str:
        """Return the ID at the current position without consuming it."""
        return self._stream.peek()

    def to_config(self) -> ProviderConfig:
        """Snapshot the provider so it can be rebuilt at its current position."""
        return ProviderConfig(
            alphabet="".join(self._alphabet),
            start_position=self.position,
            prefix=self._prefix,
        )
