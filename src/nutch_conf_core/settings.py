"""Host-level settings for configuration materialization.

The host resolution path is what every fresh ConfigStore starts with:
operator configuration directories from ``NUTCH_CONF_DIR`` followed by the
``conf/`` directory bundled with this package.
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

CONF_DIR_ENV = "NUTCH_CONF_DIR"

_BUNDLED_CONF_DIR = Path(__file__).parent / "conf"


class HostSettings(BaseModel):
    """Settings describing the host framework's own configuration locations."""

    conf_dirs: list[Path] = Field(
        default_factory=list,
        description="Operator configuration directories, searched before the bundled defaults",
    )
    bundled_conf_dir: Path = Field(
        default=_BUNDLED_CONF_DIR,
        description="Configuration directory shipped with the package",
    )

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @field_validator("conf_dirs")
    @classmethod
    def _normalize_conf_dirs(cls, v: list[Path]) -> list[Path]:
        return [Path(p).expanduser() for p in v if str(p).strip()]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HostSettings":
        env = os.environ if environ is None else environ
        raw = env.get(CONF_DIR_ENV, "")
        conf_dirs = [Path(part) for part in raw.split(os.pathsep) if part.strip()]
        if conf_dirs:
            logger.debug(f"{CONF_DIR_ENV} adds host locations: {conf_dirs}")
        return cls(conf_dirs=conf_dirs)

    def resolution_path(self) -> list[str]:
        """Return the host resolution path, operator directories first."""
        return [str(p) for p in self.conf_dirs] + [str(self.bundled_conf_dir)]
