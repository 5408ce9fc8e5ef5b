"""Tests for identity tagging."""

import uuid

from nutch_conf_core import identity
from nutch_conf_core.store import ConfigStore


def test_assign_writes_uuid_under_reserved_key():
    store = ConfigStore([])
    tag = identity.assign(store)

    assert store.get(identity.IDENTITY_KEY) == tag
    assert identity.read(store) == tag
    assert uuid.UUID(tag).version == 4


def test_read_untagged_store_returns_none():
    store = ConfigStore([])
    store.set("http.agent.name", "bot")
    assert identity.read(store) is None


def test_identical_contents_get_distinct_identities():
    first = ConfigStore([])
    second = ConfigStore([])
    for store in (first, second):
        store.set("k", "v")

    assert identity.assign(first) != identity.assign(second)
