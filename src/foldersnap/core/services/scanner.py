from __future__ import annotations

"""
Folder Scan Orchestrator.

Owns the root node of a snapshot, drives the directory walk and feeds each
entry to the tree builder. Walk and read failures are not caught here.
"""

import logging
import os
from typing import Optional

from foldersnap.core.analysis.tree_builder import insert_entry
from foldersnap.core.pipeline.components.filters import should_skip
from foldersnap.core.services.walker import WalkEntry, walk_entries
from foldersnap.domain.config import ScanConfig
from foldersnap.domain.tree_models import DirectoryNode, count_nodes

logger = logging.getLogger(__name__)

# ==============================================================================
# PUBLIC API
# ==============================================================================

def root_name(root_path: str) -> str:
    """Return the base name used for the root node."""
    return os.path.basename(os.path.normpath(root_path)) or root_path


def scan(root_path: str, config: Optional[ScanConfig] = None) -> DirectoryNode:
    """
    Build the snapshot tree of a folder.

    Args:
        root_path: Directory to scan.
        config: Scan policy; defaults to an unfiltered `ScanConfig`.

    Returns:
        DirectoryNode: Root of the completed tree, named after `root_path`.

    Raises:
        OSError: If a directory cannot be listed or a kept file cannot be read.
        UnicodeDecodeError: If a kept file is not valid UTF-8 text.
    """
    config = config or ScanConfig()
    root = DirectoryNode(name=root_name(root_path))
    logger.info(f"Scanning: {root_path}")

    def _prune(entry: WalkEntry) -> bool:
        return should_skip(entry.path, root_path, config)

    for entry in walk_entries(root_path, prune=_prune):
        insert_entry(entry, root, root_path, config)

    stats = count_nodes(root)
    logger.info(f"Scan complete: {stats['files']} files, {stats['directories'] - 1} directories")
    return root
