"""Ordered string key/value configuration store with a resolution path."""

import logging
import os
from typing import Any, Iterator, Mapping, Optional, Sequence

from .resources import ResourceLocation, locate, read_resource, stringify_value
from .settings import HostSettings

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true"}
_FALSE_VALUES = {"false"}


class ConfigStore:
    """Mutable, insertion-ordered mapping of string keys to string values.

    Besides the properties themselves, a store carries a resolution path: the
    ordered locations searched by ``add_resource`` when a named resource is
    layered in. A fresh store starts with the host resolution path.
    """

    def __init__(
        self,
        resolution_path: Optional[Sequence[Any]] = None,
        *,
        settings: Optional[HostSettings] = None,
    ) -> None:
        if resolution_path is None:
            resolution_path = (settings or HostSettings.from_env()).resolution_path()
        self._props: dict[str, str] = {}
        self._resolution_path: tuple[str, ...] = tuple(os.fspath(p) for p in resolution_path)
        self._loaded: list[ResourceLocation] = []

    # Resolution path

    @property
    def resolution_path(self) -> tuple[str, ...]:
        return self._resolution_path

    def set_resolution_path(self, locations: Sequence[Any]) -> None:
        """Replace the resolution path. Never appends to the previous one."""
        self._resolution_path = tuple(os.fspath(p) for p in locations)

    # Resources

    @property
    def loaded_resources(self) -> tuple[ResourceLocation, ...]:
        return tuple(self._loaded)

    def add_resource(self, name: str) -> Optional[ResourceLocation]:
        """Layer the named resource on top of the current properties.

        Returns:
            Where the resource was found, or None if no location on the
            resolution path holds it (the store is left untouched).

        Raises:
            ResourceParseError: If the resource exists but cannot be parsed
        """
        found = locate(name, self._resolution_path)
        if found is None:
            logger.debug(f"Resource '{name}' not found on {len(self._resolution_path)} locations")
            return None

        pairs = read_resource(found)
        for key, value in pairs:
            self._props[key] = value
        self._loaded.append(found)
        return found

    # Properties

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._props.get(key, default)

    def set(self, key: Any, value: Any) -> None:
        self._props[stringify_value(key)] = stringify_value(value)

    def update(self, properties: Mapping[Any, Any]) -> None:
        for key, value in properties.items():
            self.set(key, value)

    def unset(self, key: str) -> None:
        self._props.pop(key, None)

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        raw = self._props.get(key)
        if raw is None:
            return default
        try:
            return int(raw.strip())
        except ValueError:
            return default

    def get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        raw = self._props.get(key)
        if raw is None:
            return default
        try:
            return float(raw.strip())
        except ValueError:
            return default

    def get_bool(self, key: str, default: Optional[bool] = None) -> Optional[bool]:
        raw = self._props.get(key)
        if raw is None:
            return default
        normalized = raw.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        return default

    def get_strings(self, key: str, default: Optional[list[str]] = None) -> Optional[list[str]]:
        """Split a comma-separated value, dropping blank entries."""
        raw = self._props.get(key)
        if raw is None:
            return default
        return [part.strip() for part in raw.split(",") if part.strip()]

    def items(self) -> list[tuple[str, str]]:
        return list(self._props.items())

    def to_dict(self) -> dict[str, str]:
        return dict(self._props)

    def __contains__(self, key: object) -> bool:
        return key in self._props

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._props))

    def __len__(self) -> int:
        return len(self._props)

    def __repr__(self) -> str:
        resources = ", ".join(found.member for found in self._loaded)
        return f"ConfigStore: {resources}" if resources else "ConfigStore: (no resources)"
