"""Python runner: hand the file straight to the interpreter."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from runfile.config import RunConfig
from runfile.errors import ProcessError

logger = logging.getLogger(__name__)


class PythonRunner:
    def __init__(self, config: RunConfig) -> None:
        self.config = config

    def run(self, source: Path) -> None:
        cmd = [self.config.python, str(source)]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd)
        except OSError as e:
            raise ProcessError(f"could not run {cmd[0]}: {e}", command=cmd) from e

        if result.returncode != 0:
            raise ProcessError(
                "failed to execute python script",
                command=cmd,
                returncode=result.returncode,
            )
