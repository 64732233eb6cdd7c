"""Runner protocol: every language backend conforms to this interface."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Runner(Protocol):
    """Protocol for single-file language runners."""

    def run(self, source: Path) -> None:
        """Execute *source*, raising a ``RunfileError`` on failure."""
        ...
