"""Short, ordered, human-readable IDs over an arbitrary alphabet."""

from identigenium.core import alphabets
from identigenium.core.engine import SequenceCursor, rank, render
from identigenium.core.errors import (
    IdentigeniumError,
    InvalidAlphabetError,
    InvalidPositionError,
)
from identigenium.core.models import ProviderConfig
from identigenium.core.providers import (
    ConfigurableIDProvider,
    IDSource,
    IdStream,
    IncrementalIDProvider,
)

# Names used by earlier releases
IDProvider = IncrementalIDProvider
DynamicIDProvider = ConfigurableIDProvider

__all__ = [
    "alphabets",
    "render",
    "rank",
    "SequenceCursor",
    "IdentigeniumError",
    "InvalidAlphabetError",
    "InvalidPositionError",
    "ProviderConfig",
    "IDSource",
    "IdStream",
    "IncrementalIDProvider",
    "ConfigurableIDProvider",
    "IDProvider",
    "DynamicIDProvider",
]
