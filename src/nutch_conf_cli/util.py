from __future__ import annotations

import logging
import os
import sys

import typer


def configure_stdio() -> None:
    """Replace unencodable characters on Windows consoles instead of crashing.

    ``config show`` and ``config get`` echo property values and resource
    locations verbatim. Job bundles and site files may carry non-ASCII agent
    names, descriptions or paths, which a cp1252 console cannot encode.
    """

    if os.name != "nt":
        return

    for stream in (sys.stdout, sys.stderr):
        try:
            stream.reconfigure(errors="replace")
        except AttributeError:
            continue


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def parse_properties(pairs: list[str] | None) -> dict[str, str]:
    """Parse repeated ``-D key=value`` options into a property mapping."""
    properties: dict[str, str] = {}
    for raw in pairs or []:
        key, sep, value = raw.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got {raw!r}")
        properties[key] = value
    return properties
