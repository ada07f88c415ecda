"""state-up configuration.

Typed settings for a single ``state-up add`` run. Values come from CLI flags,
environment variables, or a saved JSON file, and are validated by Pydantic
at construction time.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from state_up.models import PackageManager

MANIFEST_FILENAME = "package.json"
STORE_DIRNAME = "store"


class Config(BaseModel):
    """Global state-up configuration.

    Created once by the CLI entry point and handed to ``ReduxSetup``.
    """

    project_dir: Path = Field(default=Path("."))
    manifest_name: str = Field(default=MANIFEST_FILENAME)
    package_manager: PackageManager = Field(default=PackageManager.NPM)
    install: bool = Field(default=True, description="Run the package manager after editing the manifest")
    install_timeout: Optional[int] = Field(
        default=None, ge=1, description="Install timeout in seconds; None waits indefinitely"
    )

    @field_validator("package_manager", mode="before")
    @classmethod
    def _parse_package_manager(cls, value: Any) -> PackageManager:
        return PackageManager.parse(value)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def manifest_path(self) -> Path:
        """Path to the target project's ``package.json``."""
        return self.project_dir / self.manifest_name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            STATE_UP_PROJECT_DIR, STATE_UP_PACKAGE_MANAGER,
            STATE_UP_SKIP_INSTALL, STATE_UP_INSTALL_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("STATE_UP_PROJECT_DIR"):
            kwargs["project_dir"] = Path(os.environ["STATE_UP_PROJECT_DIR"])
        if os.environ.get("STATE_UP_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["STATE_UP_PACKAGE_MANAGER"]
        if os.environ.get("STATE_UP_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["STATE_UP_INSTALL_TIMEOUT"])

        skip = os.environ.get("STATE_UP_SKIP_INSTALL", "").strip().lower()
        kwargs["install"] = skip not in ("1", "true", "yes")

        return cls(**kwargs)
