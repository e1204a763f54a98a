"""Tests for the installable package metadata."""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _project() -> dict:
    with PYPROJECT.open("rb") as f:
        return tomllib.load(f)["project"]


def test_long_description_is_not_the_design_notes():
    assert _project().get("readme") != "DESIGN.md"


def test_console_script():
    assert _project()["scripts"]["poolbet"] == "poolbet.cli:app"


def test_runtime_dependencies():
    names = {dep.split(">")[0].split("=")[0] for dep in _project()["dependencies"]}
    assert {"pydantic-settings", "structlog", "typer", "rich", "pandas"} <= names
