"""Infer external crate dependencies from the ``use`` declarations of a Rust file."""

from __future__ import annotations

import logging

import tree_sitter_rust as tsrust
from tree_sitter import Language, Node, Parser

from runfile.errors import ParseError
from runfile.model import ImportGroup, ImportPath, ImportTree, reduce_import_tree

logger = logging.getLogger(__name__)

# Node types that end a path: a single segment.
_SEGMENT_TYPES = {"identifier", "crate", "self", "super", "metavariable"}


def extract_dependencies(source: str) -> set[str]:
    """Return the names of the external crates *source* imports.

    Raises :class:`ParseError` if *source* is not valid Rust.
    """
    deps: frozenset[str] = frozenset()
    for tree in parse_use_trees(source):
        deps = reduce_import_tree(tree, deps)
    logger.debug("Inferred dependencies: %s", sorted(deps))
    return set(deps)


def parse_use_trees(source: str) -> list[ImportTree]:
    """Parse *source* and return one import tree per top-level ``use``."""
    parser = Parser(Language(tsrust.language()))
    root = parser.parse(source.encode("utf-8")).root_node

    if root.has_error:
        bad = _first_error(root)
        if bad is None:
            raise ParseError("failed to parse rust source")
        row, column = bad.start_point
        what = "missing token" if bad.is_missing else "syntax error"
        raise ParseError(f"failed to parse rust source: {what}", row + 1, column + 1)

    trees: list[ImportTree] = []
    for item in root.named_children:
        if item.type != "use_declaration":
            continue
        argument = item.child_by_field_name("argument")
        if argument is None:
            continue
        trees.append(_to_import_tree(argument))
    return trees


def _first_error(node: Node) -> Node | None:
    """Depth-first search for the first ERROR or MISSING node."""
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _to_import_tree(node: Node) -> ImportTree:
    kind = node.type

    if kind in _SEGMENT_TYPES or kind == "scoped_identifier":
        return _chain(_segments(node), None)

    if kind == "scoped_use_list":
        group = _to_import_tree(node.child_by_field_name("list"))
        path = node.child_by_field_name("path")
        if path is None:
            # `use ::{a, b};`
            return group
        return _chain(_segments(path), group)

    if kind == "use_list":
        return ImportGroup(
            [
                _to_import_tree(child)
                for child in node.named_children
                if not child.type.endswith("comment")
            ]
        )

    if kind == "use_as_clause":
        return _to_import_tree(node.child_by_field_name("path"))

    if kind == "use_wildcard":
        # `use foo::bar::*;` keeps the path; a bare `use ::*;` names nothing.
        paths = [c for c in node.named_children if not c.type.endswith("comment")]
        if not paths:
            return ImportGroup([])
        return _to_import_tree(paths[0])

    row, column = node.start_point
    raise ParseError(f"unsupported use tree '{kind}'", row + 1, column + 1)


def _segments(node: Node) -> list[str]:
    """Flatten a (possibly scoped) path node into its segment names."""
    if node.type == "scoped_identifier":
        path = node.child_by_field_name("path")
        name = node.child_by_field_name("name")
        head = _segments(path) if path is not None else []
        return head + ([_text(name)] if name is not None else [])
    return [_text(node)]


def _chain(segments: list[str], tail: ImportTree | None) -> ImportTree:
    """Build nested path nodes ``a -> b -> ... -> tail``."""
    tree = tail
    for segment in reversed(segments):
        tree = ImportPath(segment, tree)
    if tree is None:
        return ImportGroup([])
    return tree


def _text(node: Node) -> str:
    # `r#async` names the crate `async`.
    return node.text.decode("utf-8").removeprefix("r#")
