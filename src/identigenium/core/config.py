"""Config loading utilities for identigenium."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from identigenium.core.alphabets import resolve_alphabet
from identigenium.core.errors import InvalidAlphabetError
from identigenium.core.models import ProviderConfig
from identigenium.core.providers import ConfigurableIDProvider

logger = logging.getLogger(__name__)


def load_provider_config(path: Path) -> ProviderConfig:
    """Load a :class:`ProviderConfig` from the YAML file at *path*.

    The settings may sit under a top-level ``provider`` key or directly at
    the top level. ``alphabet_name`` selects one of the registered tables in
    :mod:`identigenium.core.alphabets` instead of spelling out ``alphabet``.
    """
    logger.info("Loading provider config from %s", path)
    with path.open() as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        logger.warning("%s did not contain a mapping; using empty dict", path)
        data = {}

    section = data.get("provider", data)
    if not isinstance(section, dict):
        logger.warning("'provider' key is not a mapping; ignoring")
        section = {}

    return make_provider_config(section)


def make_provider_config(section: dict[str, Any]) -> ProviderConfig:
    """Build a ProviderConfig from a mapping of config values.

    Unknown keys are dropped with a warning rather than failing validation.
    """
    section = dict(section)
    if (name := section.pop("alphabet_name", None)) is not None:
        if "alphabet" in section:
            raise InvalidAlphabetError("Give either 'alphabet' or 'alphabet_name', not both")
        section["alphabet"] = resolve_alphabet(str(name))

    valid_fields = ProviderConfig.model_fields
    filtered = {k: v for k, v in section.items() if k in valid_fields}

    if dropped := set(section) - set(filtered):
        logger.warning("Ignoring unknown provider config keys: %s", sorted(dropped))

    return ProviderConfig(**filtered)


def make_provider(config: ProviderConfig) -> ConfigurableIDProvider:
    """Build a resumable provider from *config*."""
    logger.debug(
        "Building provider with prefix %r at position %d",
        config.prefix,
        config.start_position,
    )
    return ConfigurableIDProvider.from_config(config)
