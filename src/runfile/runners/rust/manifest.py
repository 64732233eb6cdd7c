"""Merge inferred dependencies into a Cargo.toml without disturbing the rest."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError
from tomlkit.toml_document import TOMLDocument

from runfile.errors import ManifestError

logger = logging.getLogger(__name__)

DEPENDENCY_TABLE = "dependencies"
WILDCARD_VERSION = "*"


def synthesize_manifest(path: Path, deps: Iterable[str]) -> None:
    """Rewrite the manifest at *path* so every name in *deps* is a dependency."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"could not read {path.name}: {e}") from e

    try:
        document = tomlkit.parse(text)
    except TOMLKitError as e:
        raise ManifestError(f"could not parse {path.name}: {e}") from e

    if not merge_dependencies(document, deps):
        logger.debug("%s is empty; leaving it alone", path)
        return

    path.write_text(tomlkit.dumps(document), encoding="utf-8")


def merge_dependencies(document: TOMLDocument, deps: Iterable[str]) -> bool:
    """Upsert ``name = "*"`` for each of *deps* into ``[dependencies]``.

    Other keys of the table, and every other section, are kept as they are.
    Returns False, without touching anything, when *document* is empty.
    """
    if not document:
        return False

    names = sorted(set(deps))
    table = document.get(DEPENDENCY_TABLE)
    if table is None:
        table = tomlkit.table()
        for name in names:
            table[name] = WILDCARD_VERSION
        document[DEPENDENCY_TABLE] = table
    elif isinstance(table, dict):
        for name in names:
            table[name] = WILDCARD_VERSION
    else:
        raise ManifestError(
            f"[{DEPENDENCY_TABLE}] is a {type(table).__name__}, not a table"
        )

    logger.debug("Manifest dependencies: %s", list(table.keys()))
    return True
