from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(dotenv file, environment, command-line overrides), root folder selection,
scanning, and persistence or printing of the JSON snapshot.
"""

import argparse
import json
import os
import sys
from typing import List, Optional

from foldersnap.core.pipeline.components.writer import save_tree_json, tree_to_json
from foldersnap.core.services.scanner import scan
from foldersnap.domain.config import ScanConfig, load_config
from foldersnap.infra import os_integration
from foldersnap.infra.logging import LoggingConfig, configure_logging, get_logger
from foldersnap.interface.cli import args as cli_args

logger = get_logger(__name__)

# Process exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr, plus an optional log file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Configuration: dotenv + environment, then CLI overrides
    config = _resolve_config(args)

    if args.dump_config:
        print(json.dumps(config.to_dict(), ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Root folder resolution
    root_path = args.root or os_integration.select_folder()
    if not root_path:
        print("No folder selected")
        return EXIT_OK

    if not os.path.isdir(root_path):
        msg = f"Input path does not exist or is not a directory: {root_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_INPUT

    # 5. Scan and persistence (status goes to stderr when stdout carries JSON)
    status_stream = sys.stderr if args.stdout else sys.stdout
    print("Scanning...", file=status_stream)
    try:
        tree = scan(root_path, config)
        if args.stdout:
            payload = tree_to_json(tree)
            print(payload)
            size = len(payload)
        else:
            size = save_tree_json(tree, args.output_path)
    except KeyboardInterrupt:
        logger.warning("Scan interrupted by user")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except (OSError, UnicodeDecodeError) as e:
        logger.critical(f"Scan failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Summary and viewer
    print(f"Scanned structure size: {size} characters", file=status_stream)

    if args.open_result and not args.stdout:
        os_integration.open_in_default_app(os.path.abspath(args.output_path))

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _resolve_config(args: argparse.Namespace) -> ScanConfig:
    """Load the dotenv/environment configuration and apply CLI overrides."""
    base = load_config(env_file=args.env_file)
    return base.with_overrides(**cli_args.args_to_overrides(args))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
