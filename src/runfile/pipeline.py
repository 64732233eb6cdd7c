"""Orchestrator: detect → run."""

from __future__ import annotations

import logging
from pathlib import Path

from runfile.config import RunConfig
from runfile.detect import detect_runner

logger = logging.getLogger(__name__)


def run(source: Path, config: RunConfig) -> None:
    """Run *source* with the runner its extension selects."""
    runner = detect_runner(source, config)
    logger.debug("Runner: %s for %s", type(runner).__name__, source)
    runner.run(source)
