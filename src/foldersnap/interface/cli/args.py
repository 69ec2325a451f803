from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
`ScanConfig` overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from foldersnap.domain.config import DEFAULT_ENV_FILE, DEFAULT_OUTPUT_FILE

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the foldersnap CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="foldersnap",
        description="Snapshot a folder's structure and file contents as a JSON tree.",
    )

    # --- Paths ---
    p.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Folder to scan. Opens a folder picker when omitted.",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=DEFAULT_OUTPUT_FILE,
        help=f"Target JSON file (default: {DEFAULT_OUTPUT_FILE}).",
    )
    p.add_argument(
        "--env-file",
        dest="env_file",
        default=DEFAULT_ENV_FILE,
        help=f"Dotenv file with scan settings (default: {DEFAULT_ENV_FILE}).",
    )

    # --- Scan policy overrides ---
    p.add_argument(
        "--exclude-path",
        dest="excluded_paths",
        default=None,
        help="Comma-separated relative path prefixes to leave out.",
    )
    p.add_argument(
        "--include-ext",
        dest="included_extensions",
        default=None,
        help="Comma-separated extensions whose content is kept (e.g. .py,.md).",
    )
    p.add_argument(
        "--exclude-ext",
        dest="excluded_extensions",
        default=None,
        help="Comma-separated extensions whose content is replaced by the sentinel.",
    )
    p.add_argument(
        "--skip-file",
        dest="skipped_files",
        default=None,
        help="Comma-separated file or directory names to leave out.",
    )
    p.add_argument(
        "--skipped-content",
        dest="skipped_content",
        default=None,
        help="Placeholder stored instead of skipped content.",
    )

    # --- Output handling ---
    p.add_argument(
        "--stdout",
        action="store_true",
        help="Print the JSON snapshot instead of writing a file.",
    )
    p.add_argument(
        "--open",
        dest="open_result",
        action="store_true",
        help="Open the written snapshot with the default application.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved scan configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into `ScanConfig` overrides.

    Options that were not given map to None and are ignored by
    `ScanConfig.with_overrides`.
    """
    return {
        "excluded_paths": _split_csv(args.excluded_paths),
        "included_extensions": _split_csv(args.included_extensions),
        "excluded_extensions": _split_csv(args.excluded_extensions),
        "skipped_files": _split_csv(args.skipped_files),
        "skipped_content": args.skipped_content,
    }

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    return [x.strip() for x in value.split(",") if x.strip()]
