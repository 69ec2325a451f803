from __future__ import annotations

"""
Script Minification Utility.

Strips comments and collapses whitespace from JavaScript/TypeScript sources
to reduce snapshot size. The transform is lexical: `//` or `/*` sequences
inside string literals are removed as well.
"""

import logging
import re
from typing import Final, FrozenSet

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# MINIFICATION PATTERNS
# -----------------------------------------------------------------------------

SCRIPT_EXTENSIONS: Final[FrozenSet[str]] = frozenset({".js", ".ts"})

# Block comments (non-greedy, across lines) or line comments up to the next
# line terminator (LF, CR, U+2028, U+2029)
_COMMENT_PATTERN: Final[re.Pattern] = re.compile(r"/\*[\s\S]*?\*/|//[^\r\n\u2028\u2029]*")
_WHITESPACE_PATTERN: Final[re.Pattern] = re.compile(r"\s+")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_script_extension(extension: str) -> bool:
    return extension in SCRIPT_EXTENSIONS


def minify_script(text: str) -> str:
    """
    Minify script source in-memory.

    Comments are removed before whitespace is collapsed so that line comments
    still end at their original newline.

    Args:
        text: Raw source code.

    Returns:
        str: Single-line source with comments removed and whitespace runs
             collapsed to one space.
    """
    if not text:
        return ""

    original_len = len(text)
    result = _COMMENT_PATTERN.sub("", text)
    result = _WHITESPACE_PATTERN.sub(" ", result).strip()

    reduction = 100 - (len(result) * 100 / original_len)
    logger.debug(f"Minified script: {original_len} -> {len(result)} chars ({reduction:.1f}% reduction)")
    return result
