"""Persistent cache shared by every invocation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from runfile.config import RunConfig

logger = logging.getLogger(__name__)

CACHE_DIR_NAME = ".run_cache"


@dataclass(frozen=True)
class CacheDirs:
    """Registry and build-artifact directories under the cache base."""

    base: Path
    registry: Path
    target: Path

    def cargo_env(self) -> dict[str, str]:
        """Environment overrides pointing cargo at the cache."""
        return {
            "CARGO_HOME": str(self.registry),
            "CARGO_TARGET_DIR": str(self.target),
        }


def resolve_cache_dirs(config: RunConfig) -> CacheDirs:
    """Return the cache layout for *config*, creating missing directories.

    ``exist_ok`` makes this safe when several invocations race to create the
    same directories.
    """
    base = config.cache_base / CACHE_DIR_NAME
    dirs = CacheDirs(base=base, registry=base / "registry", target=base / "target")
    for path in (dirs.registry, dirs.target):
        path.mkdir(parents=True, exist_ok=True)
    logger.debug("Cache directory: %s", base)
    return dirs
