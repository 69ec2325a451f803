from __future__ import annotations

"""
foldersnap: snapshot a folder's structure and file contents as a JSON tree.
"""

__version__ = "0.1.0"
