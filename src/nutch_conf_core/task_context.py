"""Resolution path visible to the currently executing task.

A job running on the cluster ships its own resources (typically a ``.job``
archive or an unpacked job directory). Attaching that bundle to the current
execution context makes its locations visible to ``create_default()``, which
appends them to the host resolution path.

The attached path lives in a ``ContextVar``, so every thread and asyncio task
sees only the bundles attached within its own context.
"""

import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Optional

from .errors import ResolutionContextUnavailable

_HIDDEN = object()

_task_path: ContextVar[Optional[Any]] = ContextVar("nutch_task_resolution_path", default=None)


def _interpreter_path() -> tuple[str, ...]:
    return tuple(p for p in sys.path if isinstance(p, str) and p)


def current_task_resolution_path() -> tuple[str, ...]:
    """Return the resolution path visible to the calling task.

    With no bundle attached this is the interpreter's import path.

    Raises:
        ResolutionContextUnavailable: If the path is hidden in this context
    """
    value = _task_path.get()
    if value is _HIDDEN:
        raise ResolutionContextUnavailable(
            "task context", "resolution path is hidden in this execution context"
        )
    if value is None:
        return _interpreter_path()
    return value


@contextmanager
def attach_job_bundle(*locations: Any) -> Iterator[tuple[str, ...]]:
    """Make job bundle locations visible to the current task.

    Nested attachments stack: the innermost bundle is searched first, then
    the bundles attached around it.
    """
    previous = _task_path.get()
    outer = previous if isinstance(previous, tuple) else ()
    attached = tuple(os.fspath(loc) for loc in locations) + outer
    token = _task_path.set(attached)
    try:
        yield attached
    finally:
        _task_path.reset(token)


@contextmanager
def hide_resolution_path() -> Iterator[None]:
    """Run a block in a context whose resolution path cannot be introspected."""
    token = _task_path.set(_HIDDEN)
    try:
        yield
    finally:
        _task_path.reset(token)
