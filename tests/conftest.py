"""Shared fixtures: isolate config and the process-wide registry per test."""

import os

import pytest

from schemagen import config as config_module
from schemagen.cli.commands import config_cmd
from schemagen.config import SchemagenConfig, reset_config
from schemagen.generators import GeneratorRegistry, reset_registry


@pytest.fixture(autouse=True)
def isolated_state(tmp_path, monkeypatch):
    """Point config at a temp dir, clear SCHEMAGEN_* env vars, drop singletons."""
    config_dir = tmp_path / "schemagen-config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    monkeypatch.setattr(config_cmd, "CONFIG_FILE", config_file)
    for name in list(os.environ):
        if name.startswith("SCHEMAGEN_"):
            monkeypatch.delenv(name)

    reset_config()
    reset_registry()
    yield
    reset_config()
    reset_registry()


@pytest.fixture
def config():
    return SchemagenConfig(seed=1234)


@pytest.fixture
def registry(config):
    return GeneratorRegistry.with_defaults(config)
