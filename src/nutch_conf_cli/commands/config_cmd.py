from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import tomli_w
import typer

from nutch_conf_core import (
    ConfigStore,
    NutchConfError,
    attach_job_bundle,
    create_default,
    create_from_properties,
    get_identity,
)
from nutch_conf_core.overlay import apply_properties

from ..util import parse_properties

app = typer.Typer(help="Materialize and inspect crawler configurations")

_JOB_HELP = "Job bundle (directory or zip archive) visible to the task; repeatable"


def _materialize(
    jobs: Optional[list[Path]],
    properties: dict[str, str],
    *,
    from_properties: bool = False,
    add_resources: bool = True,
) -> ConfigStore:
    try:
        if from_properties:
            return create_from_properties(add_resources, properties)
        if jobs:
            with attach_job_bundle(*jobs):
                store = create_default()
        else:
            store = create_default()
        return apply_properties(store, properties)
    except NutchConfError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _payload(store: ConfigStore) -> dict[str, Any]:
    return {
        "identity": get_identity(store) or "",
        "resolution_path": list(store.resolution_path),
        "resources": [found.describe() for found in store.loaded_resources],
        "config": store.to_dict(),
    }


def _render(payload: dict[str, Any], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(payload, indent=2)
    return tomli_w.dumps(payload)


def _check_format(format: str) -> str:
    fmt = format.lower()
    if fmt not in {"toml", "json"}:
        typer.echo("format must be toml or json", err=True)
        raise typer.Exit(1)
    return fmt


@app.command("show")
def config_show(
    jobs: Optional[list[Path]] = typer.Option(None, "--job", help=_JOB_HELP),
    define: Optional[list[str]] = typer.Option(None, "-D", "--define", help="Property override key=value; repeatable"),
    from_properties: bool = typer.Option(
        False, "--from-properties", help="Build from -D properties only, without widening the resolution path"
    ),
    no_resources: bool = typer.Option(
        False, "--no-resources", help="With --from-properties, skip nutch-default and nutch-site"
    ),
    format: str = typer.Option("json", "--format", case_sensitive=False, help="Output format: json|toml"),
):
    """Print a materialized configuration with its identity and resolution path."""
    fmt = _check_format(format)
    if from_properties and jobs:
        typer.echo("--job cannot be combined with --from-properties (the resolution path is not widened)", err=True)
        raise typer.Exit(1)
    if no_resources and not from_properties:
        typer.echo("--no-resources requires --from-properties", err=True)
        raise typer.Exit(1)
    store = _materialize(
        jobs,
        parse_properties(define),
        from_properties=from_properties,
        add_resources=not no_resources,
    )
    typer.echo(_render(_payload(store), fmt))


@app.command("get")
def config_get(
    key: str = typer.Argument(..., help="Property name"),
    jobs: Optional[list[Path]] = typer.Option(None, "--job", help=_JOB_HELP),
):
    """Print one property of the default configuration."""
    store = _materialize(jobs, {})
    value = store.get(key)
    if value is None:
        typer.echo(f"Property not set: {key}", err=True)
        raise typer.Exit(1)
    typer.echo(value)


@app.command("path")
def config_path(
    jobs: Optional[list[Path]] = typer.Option(None, "--job", help=_JOB_HELP),
):
    """Print the widened resolution path, one location per line."""
    store = _materialize(jobs, {})
    for location in store.resolution_path:
        typer.echo(location)


@app.command("export")
def config_export(
    out: Path = typer.Option(..., "--out", help="Output file path"),
    jobs: Optional[list[Path]] = typer.Option(None, "--job", help=_JOB_HELP),
    define: Optional[list[str]] = typer.Option(None, "-D", "--define", help="Property override key=value; repeatable"),
    format: str = typer.Option("toml", "--format", case_sensitive=False, help="Output format: toml|json"),
    overwrite: bool = typer.Option(False, "--overwrite", help="Overwrite if output already exists"),
):
    """Write a materialized configuration to disk."""
    fmt = _check_format(format)
    if out.exists() and not overwrite:
        typer.echo(f"Refusing to overwrite existing file: {out}", err=True)
        raise typer.Exit(1)

    store = _materialize(jobs, parse_properties(define))
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(_render(_payload(store), fmt), encoding="utf-8")
    typer.echo(f"Wrote {out}")
