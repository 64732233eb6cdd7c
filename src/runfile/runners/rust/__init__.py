"""Rust runner: infer crates, synthesize Cargo.toml, build and run."""

from __future__ import annotations

from runfile.runners.rust.manifest import merge_dependencies, synthesize_manifest
from runfile.runners.rust.project import RustRunner
from runfile.runners.rust.use_deps import extract_dependencies, parse_use_trees

__all__ = [
    "RustRunner",
    "extract_dependencies",
    "merge_dependencies",
    "parse_use_trees",
    "synthesize_manifest",
]
