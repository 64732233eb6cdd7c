"""Map a source file's extension to the runner that executes it."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from runfile.config import RunConfig
from runfile.errors import UnsupportedExtension
from runfile.runners.base import Runner
from runfile.runners.python import PythonRunner


def _rust_runner(config: RunConfig) -> Runner:
    # tree-sitter is only needed once a Rust file is actually run.
    from runfile.runners.rust import RustRunner

    return RustRunner(config)


# Exact, case-sensitive suffix match.
RUNNERS: dict[str, Callable[[RunConfig], Runner]] = {
    ".rs": _rust_runner,
    ".py": PythonRunner,
}


def detect_runner(source: Path, config: RunConfig) -> Runner:
    """Return the runner for *source*, or raise ``UnsupportedExtension``."""
    suffix = source.suffix
    factory = RUNNERS.get(suffix)
    if factory is None:
        raise UnsupportedExtension(suffix.lstrip("."), path=str(source))
    return factory(config)
