"""Nutch Conf Core - Crawler configuration materialization library."""

from .__version__ import __version__, __version_info__

from .factory import create_default, create_from_properties, get_identity
from .identity import IDENTITY_KEY
from .resources import ResourceDescriptor, ResourceLocation
from .settings import HostSettings
from .store import ConfigStore
from .task_context import attach_job_bundle, current_task_resolution_path, hide_resolution_path
from .errors import (
    NutchConfError,
    RequiredResourceLoadFailure,
    ResolutionContextUnavailable,
    ResourceLoadError,
    ResourceParseError,
)

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    # Factory
    "create_default",
    "create_from_properties",
    "get_identity",
    "IDENTITY_KEY",
    # Store
    "ConfigStore",
    "HostSettings",
    "ResourceDescriptor",
    "ResourceLocation",
    # Task context
    "attach_job_bundle",
    "current_task_resolution_path",
    "hide_resolution_path",
    # Errors
    "NutchConfError",
    "RequiredResourceLoadFailure",
    "ResolutionContextUnavailable",
    "ResourceLoadError",
    "ResourceParseError",
]
