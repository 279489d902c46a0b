"""Dotted-path addressing over the session parameters document.

A path such as ``timeouts.implicit`` is split into segments and walked one
mapping at a time. Sequences and scalars are leaves: a path can end on them
but never descend through them.
"""

import re
from enum import Enum
from typing import Any, Dict, List, MutableMapping, Tuple

from webdriver_capabilities.core.exceptions import PathError

SEGMENT_PATTERN = re.compile(r"^[A-Za-z0-9_$:\-]+$")

# Returned by lookups when nothing is stored at a path
MISSING = object()


class NodeKind(str, Enum):
    """Kinds of node found in the document tree."""
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def node_kind(value: Any) -> NodeKind:
    """Classify a document value."""
    if isinstance(value, MutableMapping):
        return NodeKind.MAPPING
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def split_path(path: str) -> List[str]:
    """
    Split a dotted path into validated segments.

    Raises:
        PathError: if the path is empty, has an empty segment, or a segment
            contains characters other than letters, digits, ``_$:-``.
    """
    if not isinstance(path, str) or not path:
        raise PathError(str(path), "Capability path must be a non-empty string")

    segments = path.split(".")
    for segment in segments:
        if not segment:
            raise PathError(path, f"Empty segment in capability path {path!r}")
        if not SEGMENT_PATTERN.match(segment):
            raise PathError(
                path,
                f"Invalid segment {segment!r} in capability path {path!r}"
            )
    return segments


def join_path(*parts: str) -> str:
    """Join path fragments, each of which may itself be dotted."""
    return ".".join(part for part in parts if part)


def get_path(root: Dict[str, Any], path: str, default: Any = MISSING) -> Any:
    """Return the value stored at ``path`` under ``root``, or ``default``."""
    node: Any = root
    for segment in split_path(path):
        if node_kind(node) is not NodeKind.MAPPING or segment not in node:
            return default
        node = node[segment]
    return node


def has_path(root: Dict[str, Any], path: str) -> bool:
    return get_path(root, path) is not MISSING


def _walk_to_parent(
    root: Dict[str, Any],
    path: str
) -> Tuple[MutableMapping, str]:
    segments = split_path(path)
    node: Any = root
    for depth, segment in enumerate(segments[:-1]):
        child = node.get(segment, MISSING)
        if child is MISSING:
            child = {}
            node[segment] = child
        elif node_kind(child) is not NodeKind.MAPPING:
            walked = ".".join(segments[:depth + 1])
            raise PathError(
                path,
                f"Cannot set {path!r}: {walked!r} holds a "
                f"{node_kind(child).value}, not a mapping"
            )
        node = child
    return node, segments[-1]


def set_path(
    root: Dict[str, Any],
    path: str,
    value: Any,
    force: bool = True
) -> bool:
    """
    Store ``value`` at ``path`` under ``root``, creating intermediate mappings.

    When ``force`` is false an existing value is left untouched.

    Returns:
        True if the value was written
    """
    parent, leaf = _walk_to_parent(root, path)
    if not force and leaf in parent:
        return False
    parent[leaf] = value
    return True
