from __future__ import annotations

"""
Snapshot Tree Builder.

Merges a flat stream of walk entries into the nested snapshot tree. Each
entry is inserted as a trie path keyed by its relative path segments:
missing ancestors are created as directories on demand, existing nodes are
reused, and file leaves receive their content exactly once, on creation.
"""

import logging
import os
from typing import List

from foldersnap.core.pipeline.components.content_policy import content_for
from foldersnap.core.pipeline.components.filters import relative_entry_path, should_skip
from foldersnap.core.services.walker import WalkEntry
from foldersnap.domain.config import ScanConfig
from foldersnap.domain.tree_models import DirectoryNode, FileLeaf, TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_segments(rel_path: str) -> List[str]:
    """Split a relative path on the platform separators, dropping empty parts."""
    if os.altsep:
        rel_path = rel_path.replace(os.altsep, os.sep)
    return [part for part in rel_path.split(os.sep) if part]


def insert_entry(
        entry: WalkEntry,
        root: DirectoryNode,
        root_path: str,
        config: ScanConfig,
) -> bool:
    """
    Insert one walk entry into the tree rooted at `root`.

    Args:
        entry: Entry from the walker; `entry.is_dir` is the single
               file-vs-directory query made for this entry.
        root: Root directory node of the snapshot.
        root_path: Filesystem path the scan started from.
        config: Active scan policy.

    Returns:
        bool: True if the entry is present in the tree afterwards.
    """
    if should_skip(entry.path, root_path, config):
        logger.debug(f"Skipped entry: {entry.path}")
        return False

    segments = split_segments(relative_entry_path(entry.path, root_path))
    if not segments:
        # The root itself is already represented by `root`
        return False

    current = root
    for segment in segments[:-1]:
        child = current.get_child(segment)
        if child is None:
            child = current.add_child(DirectoryNode(name=segment))
        elif not isinstance(child, DirectoryNode):
            logger.warning(f"Path conflict: '{segment}' is a file but '{entry.path}' lies beneath it")
            return False
        current = child

    return _attach_terminal(current, segments[-1], entry, config)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _attach_terminal(
        parent: DirectoryNode,
        name: str,
        entry: WalkEntry,
        config: ScanConfig,
) -> bool:
    """Create or reuse the node for the last segment of an entry."""
    existing = parent.get_child(name)

    if existing is not None:
        if _matches_kind(existing, entry):
            return True
        logger.warning(f"Type conflict for '{entry.path}': tree already holds a {existing.kind!r} node")
        return False

    node: TreeNode
    if entry.is_dir:
        node = DirectoryNode(name=name)
    else:
        node = FileLeaf(name=name, content=content_for(entry.path, config))
    parent.add_child(node)
    return True


def _matches_kind(node: TreeNode, entry: WalkEntry) -> bool:
    return isinstance(node, DirectoryNode) == entry.is_dir
