"""Import trees parsed from Rust ``use`` declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

# Leading path segments that never name an external crate.
RESERVED_PREFIXES = frozenset({"crate", "self", "super", "std"})


@dataclass(frozen=True)
class ImportPath:
    """``head::rest``: a leading identifier and what follows it, if anything."""

    head: str
    rest: ImportTree | None = None


@dataclass(frozen=True)
class ImportGroup:
    """``{a, b::c, ...}``: sibling subtrees sharing the enclosing prefix."""

    members: list[ImportTree] = field(default_factory=list)


ImportTree = Union[ImportPath, ImportGroup]


def reduce_import_tree(
    tree: ImportTree, acc: frozenset[str] = frozenset()
) -> frozenset[str]:
    """Fold *tree* into the set of external crate names it references.

    A path contributes only its head; whatever follows the head belongs to the
    same crate and is not inspected.  A group contributes each member in turn.
    """
    if isinstance(tree, ImportPath):
        if tree.head in RESERVED_PREFIXES:
            return acc
        return acc | {tree.head}
    for member in tree.members:
        acc = reduce_import_tree(member, acc)
    return acc
