"""Shared fixtures for promptstyle tests."""

import io

import pytest
import yaml
from rich.console import Console

from promptstyle import render_config, themes


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep NO_COLOR and registered themes from leaking between tests."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setattr(themes, "_custom_themes", {})


@pytest.fixture
def fresh_static_refs(monkeypatch):
    """Drop the shared render configs so the next access builds them again."""
    monkeypatch.setattr(render_config, "_static_configs", {})


@pytest.fixture
def write_theme(tmp_path):
    """Write a theme mapping (or raw text) to a YAML file and return its Path."""

    def _write(data, name="theme.yml"):
        path = tmp_path / name
        with open(path, "w") as f:
            if isinstance(data, str):
                f.write(data)
            else:
                yaml.dump(data, f, default_flow_style=False)
        return path

    return _write


@pytest.fixture
def ansi_console():
    """A Rich Console writing ANSI sequences into a buffer."""
    return Console(file=io.StringIO(), force_terminal=True, color_system="truecolor", width=80)
