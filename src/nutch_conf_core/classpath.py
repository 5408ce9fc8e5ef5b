"""Merging of resolution paths from the host framework and the calling task.

A resolution-path provider is any of:
- a sequence of path-like locations,
- an object exposing ``resolution_path`` as an attribute or zero-argument
  method (``ConfigStore`` and ``HostSettings`` both qualify),
- a zero-argument callable returning such a sequence.

The merged path is the host locations followed by the task locations, in
their original order. Entries are not deduplicated: a location present in
both sources appears twice, and lookups simply stop at the first match.
"""

import logging
import os
from collections.abc import Sequence
from typing import Any

from .errors import NutchConfError, ResolutionContextUnavailable
from .store import ConfigStore

logger = logging.getLogger(__name__)

HOST_SOURCE = "host framework"
TASK_SOURCE = "task context"


def locations_of(source: Any, label: str) -> list[str]:
    """Introspect a resolution-path provider into a list of location strings.

    Raises:
        ResolutionContextUnavailable: If the provider does not yield an
            ordered sequence of path-like locations
    """
    if source is None:
        raise ResolutionContextUnavailable(label, "no resolution path provider")

    try:
        provider = getattr(source, "resolution_path", source)
        value = provider() if callable(provider) else provider
    except NutchConfError:
        raise
    except Exception as e:
        raise ResolutionContextUnavailable(label, f"provider failed: {e}") from e

    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ResolutionContextUnavailable(
            label, f"expected an ordered sequence of locations, got {type(value).__name__}"
        )

    locations: list[str] = []
    for entry in value:
        try:
            location = os.fspath(entry)
        except TypeError as e:
            raise ResolutionContextUnavailable(label, f"invalid location {entry!r}") from e
        if not isinstance(location, str):
            raise ResolutionContextUnavailable(label, f"invalid location {entry!r}")
        locations.append(location)
    return locations


def merged_resolution_path(primary: Any, secondary: Any) -> list[str]:
    """Concatenate the primary (host) and secondary (task) resolution paths."""
    host = locations_of(primary, HOST_SOURCE)
    task = locations_of(secondary, TASK_SOURCE)
    return host + task


def install(store: ConfigStore, merged_path: Sequence[str]) -> None:
    """Replace the store's resolution path with ``merged_path``."""
    store.set_resolution_path(merged_path)
    logger.debug(f"Installed resolution path with {len(merged_path)} locations")


def widen(store: ConfigStore, task_source: Any) -> None:
    """Append the task's resolution path to the store's own.

    Both sources are introspected before the store is modified, so a failure
    leaves the store's path untouched.
    """
    install(store, merged_resolution_path(store, task_source))
