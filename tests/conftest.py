import zipfile
from pathlib import Path
from typing import Dict, Optional

from hypothesis import settings

from nutch_conf_core.settings import HostSettings

# Prevent Hypothesis from writing a local example database (e.g. `.hypothesis/`) during tests.
settings.register_profile("nutch-conf-tests", database=None)
settings.load_profile("nutch-conf-tests")


def write_conf_dir(
    root: Path,
    *,
    default: Optional[str] = None,
    site: Optional[str] = None,
    fmt: str = "toml",
) -> Path:
    """Write a configuration directory holding nutch-default and/or nutch-site.

    Args:
        root: Directory to create (tmp_path / "conf", for example).
        default: nutch-default contents, or None to omit the file.
        site: nutch-site contents, or None to omit the file.
        fmt: File extension, toml or xml.

    Returns:
        The configuration directory.
    """
    root.mkdir(parents=True, exist_ok=True)
    if default is not None:
        (root / f"nutch-default.{fmt}").write_text(default, encoding="utf-8")
    if site is not None:
        (root / f"nutch-site.{fmt}").write_text(site, encoding="utf-8")
    return root


def write_job_archive(path: Path, members: Dict[str, str]) -> Path:
    """Write a zip job bundle with the given root-level members."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as zf:
        for name, content in members.items():
            zf.writestr(name, content)
    return path


def host_settings(tmp_path: Path, *conf_dirs: Path) -> HostSettings:
    """Host settings isolated from the bundled conf directory and NUTCH_CONF_DIR."""
    empty = tmp_path / "bundled-empty"
    empty.mkdir(parents=True, exist_ok=True)
    return HostSettings(conf_dirs=list(conf_dirs), bundled_conf_dir=empty)


def xml_resource(properties: Dict[str, str]) -> str:
    lines = ['<?xml version="1.0"?>', "<configuration>"]
    for name, value in properties.items():
        lines.append(f"  <property><name>{name}</name><value>{value}</value></property>")
    lines.append("</configuration>")
    return "\n".join(lines) + "\n"
