"""Runtime configuration resolved once per invocation."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".runfile.toml"

DEFAULT_PYTHON = "python"
DEFAULT_CARGO = "cargo"


@dataclass(frozen=True)
class RunConfig:
    """Settings shared by the cache resolver and the runners."""

    cache_base: Path
    python: str = DEFAULT_PYTHON
    cargo: str = DEFAULT_CARGO

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> RunConfig:
        """Build a config from environment variables and ``~/.runfile.toml``.

        ``HOME`` locates the cache base, falling back to *cwd* (default: the
        current directory).  ``RUNFILE_PYTHON`` and ``RUNFILE_CARGO`` override
        whatever the config file says.
        """
        if environ is None:
            environ = os.environ
        home = environ.get("HOME")
        base = Path(home) if home else (cwd or Path.cwd())

        file_values = _read_config_file(base / CONFIG_FILE_NAME)

        python = (
            environ.get("RUNFILE_PYTHON") or file_values.get("python") or DEFAULT_PYTHON
        )
        cargo = environ.get("RUNFILE_CARGO") or file_values.get("cargo") or DEFAULT_CARGO
        return cls(cache_base=base, python=python, cargo=cargo)


def _read_config_file(path: Path) -> dict[str, str]:
    """Return string settings from the ``[runfile]`` table of *path*."""
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}

    table = data.get("runfile", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring config %s: [runfile] is not a table", path)
        return {}
    return {k: v for k, v in table.items() if isinstance(v, str) and v}
