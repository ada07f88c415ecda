"""Exceptions raised by the state-up setup steps.

Every error derives from ``StateUpError`` so the CLI can report any failure
with a single handler and exit with status 1.
"""

from __future__ import annotations

from pathlib import Path


class StateUpError(Exception):
    """Base class for all reportable state-up failures."""


class UnsupportedManager(StateUpError):
    """Raised when the requested state manager is not Redux."""

    def __init__(self, manager: str) -> None:
        self.manager = manager
        super().__init__("Currently only Redux is supported")


class ManifestMissing(StateUpError):
    """Raised when ``package.json`` does not exist in the project directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path.name} not found. Are you in the correct directory?")


class ManifestParseError(StateUpError):
    """Raised when the manifest is not a JSON object with an object ``dependencies``."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not parse {path}: {reason}")


class InstallFailure(StateUpError):
    """Raised when the package manager exits non-zero or cannot be started."""

    def __init__(self, command: str, detail: str = "") -> None:
        self.command = command
        self.detail = detail
        message = f"Failed to install dependencies with '{command}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class WriteFailure(StateUpError):
    """Raised when a file or directory cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not write {path}: {reason}")


class DirectoryCreateError(WriteFailure):
    """Raised when the store directory cannot be created."""
