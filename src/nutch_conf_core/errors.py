"""Exception taxonomy for nutch-conf-core."""

from typing import Optional


class NutchConfError(Exception):
    """Base exception for all configuration materialization errors."""

    pass


# Resolution path errors


class ResolutionContextUnavailable(NutchConfError):
    """A resolution-path source could not be introspected as a list of locations."""

    def __init__(self, source: str, details: str) -> None:
        self.source = source
        self.details = details
        super().__init__(f"Resolution path unavailable for {source}: {details}")


# Resource errors


class ResourceLoadError(NutchConfError):
    """A named configuration resource could not be layered."""

    def __init__(self, name: str, details: str) -> None:
        self.name = name
        self.details = details
        super().__init__(f"Failed to load resource '{name}': {details}")


class ResourceParseError(ResourceLoadError):
    """A resource was found on the resolution path but could not be parsed."""

    def __init__(self, name: str, location: str, details: str) -> None:
        self.location = location
        super().__init__(name, f"{location}: {details}")


class RequiredResourceLoadFailure(ResourceLoadError):
    """The mandatory defaults resource is missing or unreadable."""

    def __init__(self, name: str, details: str, resolution_path: Optional[tuple[str, ...]] = None) -> None:
        self.resolution_path = resolution_path or ()
        super().__init__(name, details)
