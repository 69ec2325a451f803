from __future__ import annotations

"""
Strict File Reading Component.

Reads whole files as UTF-8 text. Undecodable content is a hard failure:
binary files are expected to be excluded by the extension policy before
they reach this point.
"""

# -----------------------------------------------------------------------------
# TEXT READING OPERATIONS
# -----------------------------------------------------------------------------

def read_text_file(file_path: str) -> str:
    """
    Read the full text content of a file.

    Line endings are returned untranslated (CRLF and lone CR are kept).
    A leading UTF-8 byte order mark is dropped.

    Args:
        file_path: Absolute path to the target file.

    Returns:
        str: Decoded file content.

    Raises:
        OSError: If the file is missing or unreadable.
        UnicodeDecodeError: If the content is not valid UTF-8.
    """
    with open(file_path, "r", encoding="utf-8-sig", newline="") as f:
        return f.read()
