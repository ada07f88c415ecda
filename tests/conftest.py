"""Shared pytest fixtures for the state-up test suite.

Provides reusable fixtures for:
- Temporary React project directories with a ``package.json``
- Configurations that skip or mock the package-manager install
- Parsed manifests for assertions
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock, patch

import pytest

from state_up.config import Config
from state_up.models import Framework, Language, Selection


SAMPLE_MANIFEST: dict[str, Any] = {
    "name": "my-react-app",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "scripts": {
        "dev": "vite",
        "build": "vite build",
    },
    "dependencies": {
        "react": "^18.2.0",
        "react-dom": "^18.2.0",
    },
    "devDependencies": {
        "vite": "^5.0.8",
    },
}


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def write_manifest() -> Callable[[Path, Any], Path]:
    """Factory that writes *data* as ``package.json`` inside a directory."""

    def _write(directory: Path, data: Any) -> Path:
        path = directory / "package.json"
        text = data if isinstance(data, str) else json.dumps(data, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_dir(tmp_path: Path, write_manifest) -> Path:
    """Temporary React project with a typical Vite ``package.json``."""
    root = tmp_path / "my-react-app"
    root.mkdir()
    write_manifest(root, SAMPLE_MANIFEST)
    yield root


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Temporary directory with no ``package.json``."""
    root = tmp_path / "not-a-project"
    root.mkdir()
    yield root


@pytest.fixture
def read_package_json() -> Callable[[Path], dict[str, Any]]:
    """Factory that parses ``package.json`` inside a directory."""

    def _read(directory: Path) -> dict[str, Any]:
        return json.loads((directory / "package.json").read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def snapshot_tree() -> Callable[[Path], dict[str, bytes]]:
    """Factory mapping every file under a directory to its bytes."""

    def _snapshot(directory: Path) -> dict[str, bytes]:
        return {
            p.relative_to(directory).as_posix(): p.read_bytes()
            for p in sorted(directory.rglob("*"))
            if p.is_file()
        }

    return _snapshot


# ---------------------------------------------------------------------------
# Config & selections
# ---------------------------------------------------------------------------

@pytest.fixture
def no_install_config(project_dir: Path) -> Config:
    """Config for *project_dir* that never runs a package manager."""
    return Config(project_dir=project_dir, install=False)


@pytest.fixture
def install_config(project_dir: Path) -> Config:
    """Config for *project_dir* with install enabled (mock it in the test)."""
    return Config(project_dir=project_dir, install=True)


@pytest.fixture
def vite_ts() -> Selection:
    return Selection(framework=Framework.VITE, language=Language.TYPESCRIPT)


@pytest.fixture
def next_js() -> Selection:
    return Selection(framework=Framework.NEXTJS, language=Language.JAVASCRIPT)


@pytest.fixture
def mock_run_command():
    """Patch the installer's ``run_command`` with a successful AsyncMock."""
    with patch(
        "state_up.installer.run_command",
        new_callable=AsyncMock,
        return_value=(0, "added 2 packages", ""),
    ) as mock:
        yield mock


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep STATE_UP_* variables from the developer's shell out of tests."""
    for name in (
        "STATE_UP_PROJECT_DIR",
        "STATE_UP_PACKAGE_MANAGER",
        "STATE_UP_SKIP_INSTALL",
        "STATE_UP_INSTALL_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
