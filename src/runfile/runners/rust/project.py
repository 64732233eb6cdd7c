"""Build and run a single Rust file inside a throwaway cargo project."""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
import tempfile
from pathlib import Path

from runfile.cache import CacheDirs, resolve_cache_dirs
from runfile.config import RunConfig
from runfile.errors import BuildError, ProcessError, RunfileError
from runfile.runners.rust.manifest import synthesize_manifest
from runfile.runners.rust.use_deps import extract_dependencies

logger = logging.getLogger(__name__)

MANIFEST_NAME = "Cargo.toml"
ENTRY_POINT = Path("src") / "main.rs"

# Package names `cargo init` rejects or that clash with built-ins.
_REJECTED_NAMES = {
    "alloc", "core", "proc_macro", "std", "test",
    "as", "async", "await", "break", "const", "continue", "crate", "dyn",
    "else", "enum", "extern", "false", "fn", "for", "if", "impl", "in",
    "let", "loop", "match", "mod", "move", "mut", "pub", "ref", "return",
    "self", "static", "struct", "super", "trait", "true", "type", "unsafe",
    "use", "where", "while", "main",
}


def package_name(source: Path) -> str:
    """Derive a cargo package name from the file stem of *source*."""
    name = re.sub(r"[^A-Za-z0-9_-]", "_", source.stem)
    if not name or name[0].isdigit() or name.lower() in _REJECTED_NAMES:
        name = f"run_{name}"
    return name


class RustRunner:
    """Stage *source* as ``src/main.rs`` of a scratch project and ``cargo run`` it."""

    def __init__(self, config: RunConfig, cache: CacheDirs | None = None) -> None:
        self.config = config
        self._cache = cache

    @property
    def cache(self) -> CacheDirs:
        if self._cache is None:
            self._cache = resolve_cache_dirs(self.config)
        return self._cache

    def run(self, source: Path) -> None:
        with tempfile.TemporaryDirectory(prefix="run") as tmp:
            project_dir = Path(tmp)
            logger.debug("Scratch project: %s", project_dir)

            name = package_name(source)
            logger.debug("Package name: %s", name)
            self._init_project(project_dir, name)

            entry_point = project_dir / ENTRY_POINT
            try:
                shutil.copyfile(source, entry_point)
                code = entry_point.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise RunfileError(f"could not read {source}: {e}") from e

            deps = extract_dependencies(code)
            synthesize_manifest(project_dir / MANIFEST_NAME, deps)

            output = self._build_and_run(project_dir, name)
            if output:
                print(output)

    def _init_project(self, project_dir: Path, name: str) -> None:
        cmd = [
            self.config.cargo,
            "init",
            "--quiet",
            "--bin",
            "--vcs",
            "none",
            "--name",
            name,
        ]
        result = _run(cmd, project_dir)
        if result.returncode != 0:
            raise BuildError(
                "failed to initialize cargo project",
                result.stderr,
                command=cmd,
                returncode=result.returncode,
            )

    def _build_and_run(self, project_dir: Path, name: str) -> str:
        """Run ``cargo run`` against the cache and return trimmed stdout."""
        cmd = [self.config.cargo, "run", "--quiet"]
        env = {**os.environ, **self.cache.cargo_env()}
        result = _run(cmd, project_dir, env=env)
        if result.returncode != 0:
            raise BuildError(
                f"failed to build or run {name}",
                result.stderr,
                command=cmd,
                returncode=result.returncode,
            )
        return result.stdout.rstrip()


def _run(
    cmd: list[str], cwd: Path, env: dict[str, str] | None = None
) -> subprocess.CompletedProcess[str]:
    logger.debug("Running %s in %s", " ".join(cmd), cwd)
    try:
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=str(cwd),
            env=env,
        )
    except OSError as e:
        raise ProcessError(f"could not run {cmd[0]}: {e}", command=cmd) from e
