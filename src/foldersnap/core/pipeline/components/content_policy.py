from __future__ import annotations

"""
File Content Policy.

Chooses what a file node stores: the skipped-content sentinel, the raw text,
or the minified text for script sources.
"""

import logging

from foldersnap.core.pipeline.components.filters import get_extension, is_content_skipped
from foldersnap.core.pipeline.components.reader import read_text_file
from foldersnap.core.processing.minifier import is_script_extension, minify_script
from foldersnap.domain.config import ScanConfig

logger = logging.getLogger(__name__)


def content_for(file_path: str, config: ScanConfig) -> str:
    """
    Resolve the stored content of a file that passed the path filter.

    The file is only read when its extension is allowed. Read errors are not
    caught.

    Args:
        file_path: Absolute path of the file.
        config: Active scan policy.

    Returns:
        str: Sentinel, raw text, or minified script text.
    """
    extension = get_extension(file_path)

    if is_content_skipped(extension, config):
        logger.debug(f"Content skipped by extension policy ({extension}): {file_path}")
        return config.skipped_content

    content = read_text_file(file_path)

    if is_script_extension(extension):
        content = minify_script(content)

    return content
