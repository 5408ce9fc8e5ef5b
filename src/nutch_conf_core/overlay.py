"""Layering of named resources and caller properties onto a ConfigStore.

Layer order (later wins):
1) nutch-default (required)
2) nutch-site (optional; absent means no overrides)
3) caller-supplied properties
"""

import logging
from typing import Any, Mapping, Optional

from .errors import RequiredResourceLoadFailure, ResourceParseError
from .resources import ResourceDescriptor, ResourceLocation
from .store import ConfigStore

logger = logging.getLogger(__name__)

NUTCH_DEFAULT = ResourceDescriptor(name="nutch-default", required=True)
NUTCH_SITE = ResourceDescriptor(name="nutch-site", required=False)
NUTCH_RESOURCES = (NUTCH_DEFAULT, NUTCH_SITE)


def apply_resource(store: ConfigStore, descriptor: ResourceDescriptor) -> Optional[ResourceLocation]:
    """Layer one named resource onto ``store``.

    Returns:
        Where the resource was found, or None for a missing optional resource

    Raises:
        RequiredResourceLoadFailure: If a required resource is missing or unreadable
        ResourceParseError: If an optional resource exists but cannot be parsed
    """
    try:
        found = store.add_resource(descriptor.name)
    except ResourceParseError as e:
        if descriptor.required:
            raise RequiredResourceLoadFailure(
                descriptor.name, e.details, store.resolution_path
            ) from e
        raise

    if found is None:
        if descriptor.required:
            raise RequiredResourceLoadFailure(
                descriptor.name,
                f"not found on resolution path ({len(store.resolution_path)} locations)",
                store.resolution_path,
            )
        logger.debug(f"Optional resource '{descriptor.name}' not found; skipping")
        return None

    logger.debug(f"Applied resource '{descriptor.name}' from {found.describe()}")
    return found


def apply_defaults(store: ConfigStore) -> Optional[ResourceLocation]:
    return apply_resource(store, NUTCH_DEFAULT)


def apply_site_overrides(store: ConfigStore) -> Optional[ResourceLocation]:
    return apply_resource(store, NUTCH_SITE)


def apply_nutch_resources(store: ConfigStore) -> ConfigStore:
    """Layer nutch-default, then nutch-site overrides."""
    apply_defaults(store)
    apply_site_overrides(store)
    return store


def apply_properties(store: ConfigStore, properties: Mapping[Any, Any]) -> ConfigStore:
    """Layer caller properties last; keys and values are stringified."""
    for key, value in properties.items():
        store.set(key, value)
    return store
