"""Shared fixtures for the runfile test suite."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from runfile.config import RunConfig

SKELETON_MANIFEST = """\
[package]
name = "{name}"
version = "0.1.0"
edition = "2021"

[dependencies]
"""


@pytest.fixture
def config(tmp_path: Path) -> RunConfig:
    return RunConfig(cache_base=tmp_path / "home", python="python-test", cargo="cargo-test")


class FakeCargo:
    """Stand-in for ``subprocess.run`` that mimics ``cargo init`` / ``cargo run``."""

    def __init__(self, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls: list[dict] = []
        self.manifest_at_run: str | None = None
        self.main_at_run: str | None = None
        self.project_dir: Path | None = None

    def __call__(self, cmd, **kwargs):
        cwd = Path(kwargs["cwd"])
        self.calls.append({"cmd": list(cmd), **kwargs})
        self.project_dir = cwd
        if cmd[1] == "init":
            name = cmd[cmd.index("--name") + 1]
            (cwd / "src").mkdir()
            (cwd / "src" / "main.rs").write_text('fn main() {\n    println!("Hello, world!");\n}\n')
            (cwd / "Cargo.toml").write_text(SKELETON_MANIFEST.format(name=name))
            return subprocess.CompletedProcess(cmd, 0, "", "")
        self.manifest_at_run = (cwd / "Cargo.toml").read_text()
        self.main_at_run = (cwd / "src" / "main.rs").read_text()
        return subprocess.CompletedProcess(cmd, self.returncode, self.stdout, self.stderr)
