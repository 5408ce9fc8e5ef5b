"""Factory for crawler configurations.

``create_default()`` builds the configuration a crawl job runs with: the host
resolution path widened with whatever the calling task can see (its job
bundle), an identity tag, then nutch-default and nutch-site.

``create_from_properties()`` is for callers holding a self-contained property
set. It never widens the resolution path and only layers the named resources
when asked to.

Every call starts from a fresh ConfigStore and either returns it fully built
or raises; no partially built store is ever handed out.
"""

import logging
from typing import Any, Mapping, Optional

from . import classpath, identity, overlay
from .settings import HostSettings
from .store import ConfigStore
from .task_context import current_task_resolution_path

logger = logging.getLogger(__name__)


def create_default(
    *,
    task_source: Any = None,
    settings: Optional[HostSettings] = None,
) -> ConfigStore:
    """Create a configuration with the standard crawler resources.

    Args:
        task_source: Resolution-path provider for the calling task; defaults
            to the path attached to the current execution context
        settings: Host settings; defaults to ``HostSettings.from_env()``

    Raises:
        ResolutionContextUnavailable: If either resolution path cannot be read
        RequiredResourceLoadFailure: If nutch-default cannot be loaded
        ResourceParseError: If nutch-site exists but cannot be parsed
    """
    store = ConfigStore(settings=settings)
    classpath.widen(store, task_source if task_source is not None else current_task_resolution_path)
    identity.assign(store)
    overlay.apply_nutch_resources(store)
    logger.debug(f"Created {store!r} with identity {identity.read(store)}")
    return store


def create_from_properties(
    add_resources: bool,
    properties: Mapping[Any, Any],
    *,
    settings: Optional[HostSettings] = None,
) -> ConfigStore:
    """Create a configuration from supplied properties.

    Args:
        add_resources: If True, nutch-default and then nutch-site are layered
            before the properties
        properties: Properties to define or override; applied last

    Raises:
        RequiredResourceLoadFailure: If resources are requested and
            nutch-default cannot be loaded
    """
    store = ConfigStore(settings=settings)
    identity.assign(store)
    if add_resources:
        overlay.apply_nutch_resources(store)
    overlay.apply_properties(store, properties)
    return store


def get_identity(store: ConfigStore) -> Optional[str]:
    """Return the identity tag of ``store``, or None if it was created elsewhere."""
    return identity.read(store)
