from __future__ import annotations

"""
Snapshot Tree Data Models.

Provides the tagged node variants used to represent a scanned folder:
files carry their (possibly transformed) content, directories carry an
ordered list of uniquely-named children.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

# -----------------------------------------------------------------------------
# NODE TYPE TAGS
# -----------------------------------------------------------------------------

FILE_TYPE = "f"
DIRECTORY_TYPE = "d"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileLeaf:
    """
    Represents a file entry in the snapshot tree.

    Attributes:
        name: Base name of the file.
        content: Text content, minified text, or the skipped-content sentinel.
    """
    name: str
    content: str

    @property
    def kind(self) -> str:
        return FILE_TYPE


@dataclass
class DirectoryNode:
    """
    Represents a directory entry in the snapshot tree.

    Children keep first-discovery order. Names are unique within a directory;
    the lookup index mirrors `children` and is maintained by `add_child`.

    Attributes:
        name: Base name of the directory.
        children: Ordered child nodes.
    """
    name: str
    children: List[TreeNode] = field(default_factory=list)
    _index: Dict[str, TreeNode] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for child in self.children:
            if child.name in self._index:
                raise ValueError(f"Duplicate child name '{child.name}' in directory '{self.name}'")
            self._index[child.name] = child

    @property
    def kind(self) -> str:
        return DIRECTORY_TYPE

    def get_child(self, name: str) -> Optional[TreeNode]:
        """Return the child named `name`, or None."""
        return self._index.get(name)

    def add_child(self, node: TreeNode) -> TreeNode:
        """
        Append a new child node.

        Raises:
            ValueError: If a child with the same name already exists.
        """
        if node.name in self._index:
            raise ValueError(f"Duplicate child name '{node.name}' in directory '{self.name}'")
        self.children.append(node)
        self._index[node.name] = node
        return node


TreeNode = Union[FileLeaf, DirectoryNode]

# -----------------------------------------------------------------------------
# TREE STATISTICS
# -----------------------------------------------------------------------------

def count_nodes(root: TreeNode) -> Dict[str, int]:
    """
    Count files and directories below (and including) `root`.

    Returns:
        Dict[str, int]: {"files": n, "directories": m}.
    """
    files = 0
    directories = 0
    stack: List[TreeNode] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, DirectoryNode):
            directories += 1
            stack.extend(node.children)
        else:
            files += 1
    return {"files": files, "directories": directories}
