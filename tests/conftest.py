"""Shared fixtures for the Lokalise MCP tests."""

import os
from pathlib import Path
from typing import Iterator

import pytest

from lokalise_mcp.config.env_loader import EnvFileLoader, GlobalConfigLoader
from lokalise_mcp.config.loader import ConfigLoader, config
from lokalise_mcp.config.schema import CONFIG_KEYS
from lokalise_mcp.core.api import reset_lokalise_api


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run each test without Lokalise settings from the real environment.

    ``load_dotenv`` and the global config loader write to ``os.environ``
    directly, so the whole environment is restored afterwards.
    """
    saved = dict(os.environ)
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Working directory for a loader, isolated from any real .env file."""
    work = tmp_path / "project"
    work.mkdir()
    return work


@pytest.fixture
def loader(config_dir: Path, tmp_path: Path) -> ConfigLoader:
    """A fresh ConfigLoader that reads no real .env or global config."""
    return ConfigLoader(
        working_directory=config_dir,
        global_config_path=tmp_path / "configs.json",
    )


@pytest.fixture(autouse=True)
def isolated_global_config(
    clean_environment: None, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Iterator[ConfigLoader]:
    """Point the process-wide loader at an empty directory and reset its state."""
    global_work = tmp_path / "global-config-cwd"
    global_work.mkdir()

    monkeypatch.setattr(config, "env_loader", EnvFileLoader(global_work))
    monkeypatch.setattr(config, "global_loader", GlobalConfigLoader(tmp_path / "global-configs.json"))
    for attr, value in (
        ("_config_loaded", False),
        ("_merged", {}),
        ("_layers", {}),
        ("_smithery_config", None),
        ("_http_query_config", None),
        ("_mcp_init_config", None),
    ):
        monkeypatch.setattr(config, attr, value)

    yield config
    reset_lokalise_api()
