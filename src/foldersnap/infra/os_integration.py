from __future__ import annotations

"""
Host Operating System Integration.

Native folder selection dialog and "open with default application" support
for Windows, macOS and Linux (xdg-open).
"""

import logging
import os
import platform
import subprocess
from typing import Optional

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# FOLDER SELECTION
# -----------------------------------------------------------------------------

def select_folder(title: str = "Select folder to scan") -> Optional[str]:
    """
    Prompt the user for a directory using the native folder dialog.

    A hidden root window is created for the dialog and destroyed afterwards.
    The GUI toolkit is imported on demand so headless runs never load it.

    Returns:
        Optional[str]: Selected absolute path, or None when cancelled.
    """
    import customtkinter as ctk

    app = ctk.CTk()
    app.withdraw()
    try:
        path = ctk.filedialog.askdirectory(parent=app, title=title, mustexist=True)
    finally:
        app.destroy()

    path = (path or "").strip()
    if not path:
        logger.debug("Folder selection cancelled")
        return None
    return os.path.abspath(path)


# -----------------------------------------------------------------------------
# VIEWER LAUNCH
# -----------------------------------------------------------------------------

def open_in_default_app(path: str) -> bool:
    """
    Open a file with the host's default application.

    Failures are logged and reported through the return value; the snapshot
    has already been written at this point.

    Returns:
        bool: True if the viewer was launched.
    """
    if not os.path.exists(path):
        logger.warning(f"Attempted to open non-existent path: {path}")
        return False

    try:
        sys_name = platform.system()
        if sys_name == "Windows":
            os.startfile(path)
        elif sys_name == "Darwin":
            subprocess.Popen(["open", path])
        else:
            subprocess.Popen(["xdg-open", path])
    except OSError as e:
        logger.error(f"Failed to open '{path}': {e}")
        return False
    return True
