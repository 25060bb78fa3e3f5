# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from functools import lru_cache

import yaml

from .logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def load_yaml_dumper() -> type[yaml.SafeDumper]:
    """Return the fastest available safe YAML dumper (CSafeDumper if possible)."""
    try:
        from yaml import CSafeDumper as SafeDumper  # type: ignore[attr-defined]

        logger.debug("Loaded YAML CSafeDumper.")
    except ImportError:
        from yaml import SafeDumper

        logger.debug("Loaded default YAML safe dumper.")
    return SafeDumper


@lru_cache(maxsize=1)
def load_yaml_loader() -> type[yaml.SafeLoader]:
    """Return the fastest available safe YAML loader (CSafeLoader if possible)."""
    try:
        from yaml import CSafeLoader as SafeLoader  # type: ignore[attr-defined]

        logger.debug("Loaded YAML CSafeLoader.")
    except ImportError:
        from yaml import SafeLoader

        logger.debug("Loaded default YAML safe loader.")

    return SafeLoader
