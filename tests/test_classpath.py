"""Tests for merging and installing resolution paths."""

from pathlib import Path

import pytest
from hypothesis import given, strategies as st

from nutch_conf_core import classpath
from nutch_conf_core.errors import ResolutionContextUnavailable
from nutch_conf_core.settings import HostSettings
from nutch_conf_core.store import ConfigStore

locations = st.lists(st.text(min_size=1, max_size=20), max_size=10)


@given(locations, locations)
def test_merge_keeps_primary_then_secondary_order(primary, secondary):
    merged = classpath.merged_resolution_path(primary, secondary)

    assert merged == primary + secondary
    assert len(merged) == len(primary) + len(secondary)


def test_merge_preserves_duplicates():
    merged = classpath.merged_resolution_path(["/a", "/b"], ["/b", "/a", "/a"])
    assert merged == ["/a", "/b", "/b", "/a", "/a"]


def test_providers_can_be_stores_settings_callables_and_path_likes(tmp_path: Path):
    store = ConfigStore(["/host"])
    settings = HostSettings(conf_dirs=[tmp_path], bundled_conf_dir=tmp_path / "bundled")

    assert classpath.locations_of(store, "store") == ["/host"]
    assert classpath.locations_of(settings, "settings") == [str(tmp_path), str(tmp_path / "bundled")]
    assert classpath.locations_of(lambda: (tmp_path,), "callable") == [str(tmp_path)]
    assert classpath.locations_of((), "empty") == []


@pytest.mark.parametrize(
    "source",
    [
        None,
        "/a/single/string",
        b"/bytes",
        42,
        {"/a", "/b"},
        [object()],
        [b"/bytes-entry"],
        lambda: None,
    ],
)
def test_uninspectable_sources_raise(source):
    with pytest.raises(ResolutionContextUnavailable) as exc_info:
        classpath.locations_of(source, "task context")
    assert exc_info.value.source == "task context"


def test_failing_provider_is_wrapped():
    def provider():
        raise RuntimeError("sandboxed")

    with pytest.raises(ResolutionContextUnavailable, match="sandboxed"):
        classpath.merged_resolution_path(["/host"], provider)


def test_install_replaces_path_without_compounding():
    store = ConfigStore(["/host"])
    merged = classpath.merged_resolution_path(store, ["/job"])

    classpath.install(store, merged)
    classpath.install(store, merged)
    assert store.resolution_path == ("/host", "/job")


def test_widen_appends_task_path_to_store_path():
    store = ConfigStore(["/host-1", "/host-2"])
    classpath.widen(store, ["/job"])
    assert store.resolution_path == ("/host-1", "/host-2", "/job")


def test_widen_failure_leaves_store_untouched():
    store = ConfigStore(["/host"])
    with pytest.raises(ResolutionContextUnavailable):
        classpath.widen(store, None)
    assert store.resolution_path == ("/host",)


class SandboxedTask:
    """Task whose resolution path is blocked by the execution environment."""

    @property
    def resolution_path(self):
        raise PermissionError("classpath hidden by sandbox")


def test_provider_attribute_that_raises_is_wrapped():
    with pytest.raises(ResolutionContextUnavailable, match="hidden by sandbox") as exc_info:
        classpath.locations_of(SandboxedTask(), "task context")
    assert isinstance(exc_info.value.__cause__, PermissionError)


def test_widen_with_sandboxed_task_leaves_store_untouched():
    store = ConfigStore(["/host"])
    with pytest.raises(ResolutionContextUnavailable):
        classpath.widen(store, SandboxedTask())
    assert store.resolution_path == ("/host",)
