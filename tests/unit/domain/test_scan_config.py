from __future__ import annotations

"""
Unit tests for scan configuration parsing and loading.
"""

import os
from pathlib import Path

import pytest

from foldersnap.domain.config import (
    DEFAULT_SKIPPED_CONTENT,
    ScanConfig,
    config_from_mapping,
    load_config,
    normalize_extension,
    parse_env_list,
)


def test_defaults():
    config = ScanConfig()
    assert config.excluded_paths == ()
    assert config.included_extensions == ()
    assert config.excluded_extensions == ()
    assert config.skipped_files == ()
    assert config.skipped_content == DEFAULT_SKIPPED_CONTENT == "<!-- Skipped -->"


@pytest.mark.parametrize("raw, expected", [
    (None, ()),
    ("", ()),
    (".js", (".js",)),
    (" .js , .ts ,, ", (".js", ".ts")),
])
def test_parse_env_list(raw, expected):
    assert parse_env_list(raw) == expected


@pytest.mark.parametrize("raw, expected", [(".JS", ".js"), ("ts", ".ts"), (" .md ", ".md")])
def test_normalize_extension(raw, expected):
    assert normalize_extension(raw) == expected


def test_extensions_normalized_on_construction():
    config = ScanConfig(included_extensions=["PY", ".Md"], excluded_extensions=["png"])
    assert config.included_extensions == (".py", ".md")
    assert config.excluded_extensions == (".png",)


def test_paths_and_names_are_kept_verbatim():
    config = ScanConfig(excluded_paths=["Build/"], skipped_files=["Secret.TXT"])
    assert config.excluded_paths == ("Build/",)
    assert config.skipped_files == ("Secret.TXT",)


def test_config_from_mapping():
    config = config_from_mapping({
        "EXCLUDED_PATHS": "node_modules, .git",
        "INCLUDED_EXTENSIONS": ".ts,.js",
        "EXCLUDED_EXTENSIONS": ".png",
        "SKIPPED_FILES": "package-lock.json",
        "SKIPPED_CONTENT": "[skipped]",
        "UNRELATED": "ignored",
    })
    assert config.excluded_paths == ("node_modules", ".git")
    assert config.included_extensions == (".ts", ".js")
    assert config.excluded_extensions == (".png",)
    assert config.skipped_files == ("package-lock.json",)
    assert config.skipped_content == "[skipped]"


def test_empty_skipped_content_keeps_default():
    assert config_from_mapping({"SKIPPED_CONTENT": ""}).skipped_content == DEFAULT_SKIPPED_CONTENT


def test_load_config_reads_dotenv(tmp_path: Path):
    env_file = tmp_path / ".env"
    env_file.write_text("EXCLUDED_PATHS=dist,build\nSKIPPED_CONTENT=\"--\"\n", encoding="utf-8")

    config = load_config(env_file=str(env_file), environ={})
    assert config.excluded_paths == ("dist", "build")
    assert config.skipped_content == "--"


def test_environment_overrides_dotenv(tmp_path: Path):
    env_file = tmp_path / ".env"
    env_file.write_text("EXCLUDED_EXTENSIONS=.png\n", encoding="utf-8")

    config = load_config(env_file=str(env_file), environ={"EXCLUDED_EXTENSIONS": ".jpg,.gif"})
    assert config.excluded_extensions == (".jpg", ".gif")


def test_missing_env_file_falls_back_to_environment(tmp_path: Path):
    config = load_config(env_file=str(tmp_path / "absent.env"), environ={"SKIPPED_FILES": "a.txt"})
    assert config.skipped_files == ("a.txt",)


def test_load_config_does_not_touch_os_environ(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("EXCLUDED_PATHS", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("EXCLUDED_PATHS=vendor\n", encoding="utf-8")

    load_config(env_file=str(env_file))

    assert "EXCLUDED_PATHS" not in os.environ


def test_with_overrides_ignores_none():
    base = ScanConfig(excluded_paths=("dist",))
    updated = base.with_overrides(excluded_paths=None, excluded_extensions=["PNG"], skipped_content=None)
    assert updated.excluded_paths == ("dist",)
    assert updated.excluded_extensions == (".png",)
    assert updated.skipped_content == DEFAULT_SKIPPED_CONTENT


def test_with_overrides_rejects_unknown_keys():
    with pytest.raises(TypeError):
        ScanConfig().with_overrides(bogus=1)


def test_to_dict_is_json_friendly():
    data = ScanConfig(skipped_files=("a",)).to_dict()
    assert data["skipped_files"] == ["a"]
    assert data["skipped_content"] == DEFAULT_SKIPPED_CONTENT
