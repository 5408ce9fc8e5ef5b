"""Named configuration resources.

A resource name such as ``nutch-default`` resolves against a resolution path:
each location is either a directory or a zip archive (a packaged ``.job``
bundle), and the first location holding ``<name>.toml`` or ``<name>.xml``
wins. TOML is preferred over XML at the same location.

Supported formats:
- TOML: nested tables flatten to dotted keys (``[http] timeout = 10`` becomes
  ``http.timeout``); booleans render as ``true``/``false`` and arrays of
  scalars are comma-joined. Arrays of tables or nested arrays are rejected.
- XML: Hadoop-style ``<configuration><property><name/><value/></property>``.
"""

import logging
import tomllib
import xml.etree.ElementTree as ET
import zipfile
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Iterator, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .errors import ResourceParseError

logger = logging.getLogger(__name__)

RESOURCE_FORMATS = ("toml", "xml")


class ResourceDescriptor(BaseModel):
    """A named layer of key/value definitions."""

    name: str = Field(..., description="Logical resource name, without extension")
    required: bool = Field(default=False, description="Missing resource is an error")

    model_config = ConfigDict(frozen=True)


class ResourceLocation(BaseModel):
    """Where a named resource was found on the resolution path."""

    name: str = Field(..., description="Logical resource name")
    location: str = Field(..., description="Resolution path entry holding the resource")
    member: str = Field(..., description="File name inside the directory or archive")
    format: str = Field(..., description="toml or xml")
    archived: bool = Field(default=False, description="True if location is a zip archive")

    model_config = ConfigDict(frozen=True)

    def describe(self) -> str:
        if self.archived:
            return f"{self.location}!/{self.member}"
        return str(Path(self.location) / self.member)


def stringify_value(value: Any) -> str:
    """Coerce a configuration value to the string form stored in a ConfigStore."""
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_value(v) for v in value)
    return str(value)


def _archive_members(path: Path) -> Optional[set[str]]:
    if not path.is_file() or not zipfile.is_zipfile(path):
        return None
    with zipfile.ZipFile(path) as zf:
        return set(zf.namelist())


def _locate_in(name: str, location: str) -> Optional[ResourceLocation]:
    path = Path(location)
    if path.is_dir():
        for fmt in RESOURCE_FORMATS:
            member = f"{name}.{fmt}"
            if (path / member).is_file():
                return ResourceLocation(name=name, location=location, member=member, format=fmt)
        return None

    members = _archive_members(path)
    if members is None:
        return None
    for fmt in RESOURCE_FORMATS:
        member = f"{name}.{fmt}"
        if member in members:
            return ResourceLocation(
                name=name, location=location, member=member, format=fmt, archived=True
            )
    return None


def locate(name: str, resolution_path: Sequence[str]) -> Optional[ResourceLocation]:
    """Find the first location on the resolution path that holds ``name``.

    Locations that cannot be inspected (unsearchable directories, names the
    filesystem rejects, unreadable archives) are skipped.

    Args:
        name: Logical resource name (e.g. ``nutch-site``)
        resolution_path: Ordered locations to search

    Returns:
        The matching ResourceLocation, or None if no location holds the resource
    """
    for location in resolution_path:
        try:
            found = _locate_in(name, location)
        except (OSError, zipfile.BadZipFile) as e:
            logger.debug(f"Skipping unreadable location {location}: {e}")
            continue
        if found is not None:
            return found
    return None


def _read_bytes(found: ResourceLocation) -> bytes:
    try:
        if found.archived:
            with zipfile.ZipFile(found.location) as zf:
                return zf.read(found.member)
        return (Path(found.location) / found.member).read_bytes()
    except (OSError, KeyError, zipfile.BadZipFile) as e:
        raise ResourceParseError(found.name, found.describe(), f"cannot read: {e}") from e


def _flatten(found: ResourceLocation, data: dict[str, Any], prefix: str = "") -> Iterator[tuple[str, str]]:
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            yield from _flatten(found, value, f"{full_key}.")
        elif isinstance(value, list) and any(isinstance(v, (dict, list)) for v in value):
            raise ResourceParseError(
                found.name, found.describe(), f"{full_key}: arrays may only hold scalar values"
            )
        else:
            yield full_key, stringify_value(value)


def _parse_toml(found: ResourceLocation, raw: bytes) -> list[tuple[str, str]]:
    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ResourceParseError(found.name, found.describe(), str(e)) from e
    return list(_flatten(found, data))


def _parse_xml(found: ResourceLocation, raw: bytes) -> list[tuple[str, str]]:
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as e:
        raise ResourceParseError(found.name, found.describe(), str(e)) from e
    if root.tag != "configuration":
        raise ResourceParseError(
            found.name, found.describe(), f"root element must be <configuration>, got <{root.tag}>"
        )

    pairs: list[tuple[str, str]] = []
    for prop in root.findall("property"):
        name_elem = prop.find("name")
        key = (name_elem.text or "").strip() if name_elem is not None else ""
        if not key:
            continue
        value_elem = prop.find("value")
        value = value_elem.text if value_elem is not None and value_elem.text else ""
        pairs.append((key, value))
    return pairs


def read_resource(found: ResourceLocation) -> list[tuple[str, str]]:
    """Read a located resource into ordered (key, value) string pairs.

    Raises:
        ResourceParseError: If the resource cannot be read or parsed
    """
    raw = _read_bytes(found)
    if found.format == "toml":
        pairs = _parse_toml(found, raw)
    else:
        pairs = _parse_xml(found, raw)
    logger.debug(f"Read {len(pairs)} properties from {found.describe()}")
    return pairs
