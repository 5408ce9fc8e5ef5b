"""Tests for the task-scoped resolution path."""

import sys
from pathlib import Path

import pytest

from nutch_conf_core.errors import ResolutionContextUnavailable
from nutch_conf_core.task_context import (
    attach_job_bundle,
    current_task_resolution_path,
    hide_resolution_path,
)


def test_default_path_is_interpreter_import_path():
    expected = tuple(p for p in sys.path if isinstance(p, str) and p)
    assert current_task_resolution_path() == expected


def test_attach_job_bundle_scopes_the_path(tmp_path: Path):
    before = current_task_resolution_path()
    with attach_job_bundle(tmp_path / "crawl.job") as attached:
        assert attached == (str(tmp_path / "crawl.job"),)
        assert current_task_resolution_path() == attached
    assert current_task_resolution_path() == before


def test_nested_bundles_stack_innermost_first():
    with attach_job_bundle("/outer.job"):
        with attach_job_bundle("/inner.job", "/inner-lib"):
            assert current_task_resolution_path() == ("/inner.job", "/inner-lib", "/outer.job")
        assert current_task_resolution_path() == ("/outer.job",)


def test_hidden_path_raises_until_block_exits():
    with hide_resolution_path():
        with pytest.raises(ResolutionContextUnavailable):
            current_task_resolution_path()
        with attach_job_bundle("/job"):
            assert current_task_resolution_path() == ("/job",)
    assert isinstance(current_task_resolution_path(), tuple)

