from __future__ import annotations

"""
Snapshot Serialization and Persistence.

Converts the snapshot tree into its JSON-compatible form
(`name`, `type`, `content` for files, `children` for directories) and
writes it to disk.
"""

import json
import logging
import os
from typing import Any, Dict

from foldersnap.domain.tree_models import DirectoryNode, TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SERIALIZATION
# -----------------------------------------------------------------------------

def tree_to_dict(node: TreeNode) -> Dict[str, Any]:
    """
    Convert a node and its descendants into nested plain dictionaries.

    Args:
        node: Root of the subtree to convert.

    Returns:
        Dict[str, Any]: JSON-compatible structure.
    """
    if isinstance(node, DirectoryNode):
        return {
            "name": node.name,
            "type": node.kind,
            "children": [tree_to_dict(child) for child in node.children],
        }
    return {"name": node.name, "type": node.kind, "content": node.content}


def tree_to_json(node: TreeNode, indent: int = 2) -> str:
    return json.dumps(tree_to_dict(node), ensure_ascii=False, indent=indent)

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def save_tree_json(node: TreeNode, output_path: str, indent: int = 2) -> int:
    """
    Serialize the tree and write it to `output_path` as UTF-8 JSON.

    Args:
        node: Root of the snapshot.
        output_path: Target file; parent directories are created.
        indent: JSON indentation.

    Returns:
        int: Length of the serialized structure in characters.

    Raises:
        OSError: If the file cannot be written.
    """
    payload = tree_to_json(node, indent=indent)

    try:
        parent = os.path.dirname(os.path.abspath(output_path))
        os.makedirs(parent, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(payload)
    except OSError as e:
        logger.error(f"Failed to save snapshot to '{output_path}': {e}")
        raise

    logger.info(f"Snapshot saved to file: {output_path}")
    return len(payload)
