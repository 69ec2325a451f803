from __future__ import annotations

"""
Directory Walk Service.

Yields every filesystem entry below a root, directories included, as a flat
stream. Traversal is depth-first with each directory yielded before its
contents, and siblings sorted by name so that repeated walks of an unchanged
tree produce the same sequence.
"""

import logging
import os
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkEntry:
    """
    One filesystem object produced by the walk.

    Attributes:
        path: Native path of the entry (root joined with its relative path).
        is_dir: Whether the entry resolves to a directory (symlinks followed).
    """
    path: str
    is_dir: bool


PruneFunc = Callable[[WalkEntry], bool]


def walk_entries(root_path: str, prune: Optional[PruneFunc] = None) -> Iterator[WalkEntry]:
    """
    Walk `root_path` and yield the root followed by all of its descendants.

    Symlinked directories are yielded as directories but never descended
    into. `os.scandir` failures (missing root, permission denied) propagate.

    Args:
        root_path: Directory to walk.
        prune: Optional predicate; descendant directories for which it returns True are
               yielded but their contents are not visited.

    Yields:
        WalkEntry: Entries in depth-first pre-order.
    """
    yield WalkEntry(path=root_path, is_dir=True)

    # Explicit stack of sorted child lists keeps recursion depth flat
    stack: List[Iterator[os.DirEntry]] = [_sorted_children(root_path)]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue

        entry = WalkEntry(path=child.path, is_dir=child.is_dir())
        yield entry

        if not entry.is_dir or child.is_symlink():
            continue
        if prune is not None and prune(entry):
            logger.debug(f"Pruned directory: {entry.path}")
            continue
        stack.append(_sorted_children(entry.path))


def _sorted_children(dir_path: str) -> Iterator[os.DirEntry]:
    """List a directory eagerly so scandir errors surface immediately."""
    with os.scandir(dir_path) as it:
        children = sorted(it, key=lambda e: e.name)
    return iter(children)
