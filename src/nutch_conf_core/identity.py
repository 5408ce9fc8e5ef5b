"""Identity tags for configuration instances.

Two stores with identical properties compare equal by content, so each store
built by this package is stamped with a random UUID under a reserved key.
Resources and property layers must not set that key.
"""

import uuid
from typing import Optional

from .store import ConfigStore

IDENTITY_KEY = "nutch.conf.uuid"


def assign(store: ConfigStore) -> str:
    """Stamp ``store`` with a fresh identity and return it."""
    tag = str(uuid.uuid4())
    store.set(IDENTITY_KEY, tag)
    return tag


def read(store: ConfigStore) -> Optional[str]:
    """Return the identity of ``store``, or None if it was never tagged."""
    return store.get(IDENTITY_KEY)
