from __future__ import annotations

"""
Path Exclusion and Extension Filtering.

Implements the two filtering stages of the scan policy: removing entries from
the tree by relative-path prefix or bare name, and deciding from a file's
extension whether its content is kept.
"""

import os

from foldersnap.domain.config import ScanConfig

# -----------------------------------------------------------------------------
# PATH HELPERS
# -----------------------------------------------------------------------------

def relative_entry_path(entry_path: str, root_path: str) -> str:
    """
    Compute an entry's path relative to the scan root.

    Returns an empty string for the root itself.
    """
    rel = os.path.relpath(entry_path, root_path)
    return "" if rel == os.curdir else rel


def get_extension(file_path: str) -> str:
    """
    Derive the policy extension of a file.

    The extension is the text after the last '.' of the base name, lower-cased
    and prefixed with '.'. A name without a dot yields '.'.

    Args:
        file_path: Path or bare name of the file.

    Returns:
        str: Extension such as '.js', or '.' when the name has no dot.
    """
    name = os.path.basename(file_path)
    if "." not in name:
        return "."
    return "." + name.rsplit(".", 1)[1].lower()

# -----------------------------------------------------------------------------
# FILTER PREDICATES
# -----------------------------------------------------------------------------

def should_skip(entry_path: str, root_path: str, config: ScanConfig) -> bool:
    """
    Decide whether an entry is excluded from the tree entirely.

    Args:
        entry_path: Path of the walked entry.
        root_path: Scan root.
        config: Active scan policy.

    Returns:
        bool: True when the relative path starts with an excluded prefix or
              the base name is listed in `skipped_files`.
    """
    rel_path = relative_entry_path(entry_path, root_path)
    if any(rel_path.startswith(prefix) for prefix in config.excluded_paths):
        return True
    return os.path.basename(entry_path) in config.skipped_files


def is_content_skipped(extension: str, config: ScanConfig) -> bool:
    """True when the extension policy replaces content with the sentinel."""
    if config.included_extensions and extension not in config.included_extensions:
        return True
    return extension in config.excluded_extensions
