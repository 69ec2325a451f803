from __future__ import annotations

"""
Scan Configuration Domain.

Resolves the scan policy (path exclusions, extension filters, skipped files
and the skipped-content sentinel) from a `.env` file and the process
environment. The resulting `ScanConfig` is an explicit, immutable value that
is threaded through every scan component.
"""

import logging
import os
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_SKIPPED_CONTENT = "<!-- Skipped -->"
DEFAULT_ENV_FILE = ".env"
DEFAULT_OUTPUT_FILE = "folder_structure.json"

# Environment variable name for each list-valued setting
ENV_KEYS: Dict[str, str] = {
    "excluded_paths": "EXCLUDED_PATHS",
    "included_extensions": "INCLUDED_EXTENSIONS",
    "excluded_extensions": "EXCLUDED_EXTENSIONS",
    "skipped_files": "SKIPPED_FILES",
}
SKIPPED_CONTENT_KEY = "SKIPPED_CONTENT"

_EXTENSION_FIELDS = ("included_extensions", "excluded_extensions")


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ScanConfig:
    """
    Immutable scan policy.

    Attributes:
        excluded_paths: Relative-path prefixes removed from the tree entirely.
        included_extensions: Allow-list of extensions; empty allows all.
        excluded_extensions: Deny-list of extensions.
        skipped_files: Base names removed from the tree entirely.
        skipped_content: Sentinel stored in place of omitted file content.
    """
    excluded_paths: Tuple[str, ...] = field(default_factory=tuple)
    included_extensions: Tuple[str, ...] = field(default_factory=tuple)
    excluded_extensions: Tuple[str, ...] = field(default_factory=tuple)
    skipped_files: Tuple[str, ...] = field(default_factory=tuple)
    skipped_content: str = DEFAULT_SKIPPED_CONTENT

    def __post_init__(self) -> None:
        # Normalize eagerly so equality and lookups see canonical values
        for name in ENV_KEYS:
            values = tuple(getattr(self, name) or ())
            if name in _EXTENSION_FIELDS:
                values = tuple(normalize_extension(v) for v in values)
            object.__setattr__(self, name, values)

    def with_overrides(self, **overrides: Any) -> ScanConfig:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(changes) - set(asdict(self))
        if unknown:
            raise TypeError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for name in ENV_KEYS:
            data[name] = list(data[name])
        return data


# -----------------------------------------------------------------------------
# Parsing Helpers
# -----------------------------------------------------------------------------
def parse_env_list(value: Optional[str]) -> Tuple[str, ...]:
    """
    Split a comma-separated setting into trimmed, non-empty items.

    Args:
        value: Raw value such as ".js, .ts".

    Returns:
        Tuple[str, ...]: Parsed items, empty when the value is missing.
    """
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


def normalize_extension(ext: str) -> str:
    """Lower-case an extension and make sure it carries a leading dot."""
    ext = ext.strip().lower()
    if not ext.startswith("."):
        ext = "." + ext
    return ext


def config_from_mapping(values: Mapping[str, Optional[str]]) -> ScanConfig:
    """
    Build a `ScanConfig` from environment-style key/value pairs.

    Unknown keys are ignored. A missing or empty SKIPPED_CONTENT keeps the
    default sentinel.
    """
    kwargs: Dict[str, Any] = {
        name: parse_env_list(values.get(env_key)) for name, env_key in ENV_KEYS.items()
    }
    kwargs["skipped_content"] = values.get(SKIPPED_CONTENT_KEY) or DEFAULT_SKIPPED_CONTENT
    return ScanConfig(**kwargs)


# -----------------------------------------------------------------------------
# Loading API
# -----------------------------------------------------------------------------
def load_config(
        env_file: Optional[str] = DEFAULT_ENV_FILE,
        environ: Optional[Mapping[str, str]] = None,
) -> ScanConfig:
    """
    Resolve the scan configuration from a dotenv file and the environment.

    Values from the process environment take precedence over the file.
    Neither `os.environ` nor the file is modified.

    Args:
        env_file: Path to a dotenv file. Missing files are ignored.
        environ: Environment mapping, defaults to `os.environ`.

    Returns:
        ScanConfig: The resolved configuration.
    """
    merged: Dict[str, Optional[str]] = {}

    if env_file and os.path.isfile(env_file):
        logger.debug(f"Loading configuration from {env_file}")
        merged.update(dotenv_values(env_file))
    elif env_file and env_file != DEFAULT_ENV_FILE:
        logger.warning(f"Configuration file not found: {env_file}")

    env = os.environ if environ is None else environ
    merged.update({k: env[k] for k in _known_keys() if k in env})

    return config_from_mapping(merged)


def _known_keys() -> Iterable[str]:
    yield from ENV_KEYS.values()
    yield SKIPPED_CONTENT_KEY
