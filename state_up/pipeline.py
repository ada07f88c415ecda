"""Redux setup orchestrator.

Runs the ``state-up add redux`` steps in order:

1. Update ``package.json`` with ``@reduxjs/toolkit`` and ``react-redux``.
2. Install dependencies with the configured package manager.
3. Write the store files into ``src/store/`` or ``app/store/``.

The first failure aborts the run.  Earlier steps are not undone: if the
install or a file write fails, ``package.json`` keeps the added entries.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from state_up.config import Config
from state_up.installer import install_dependencies
from state_up.manifest import REDUX_DEPENDENCIES, update_manifest
from state_up.models import Selection
from state_up.scaffolder import TemplateEmitter


class SetupResult(BaseModel):
    """What a successful run changed in the target project."""

    manifest_path: Path
    manifest: dict[str, Any] = Field(default_factory=dict)
    installed: bool = False
    files: list[Path] = Field(default_factory=list)


class ReduxSetup:
    """Add Redux Toolkit to a React project.

    Attributes:
        config: Run configuration (project directory, package manager, ...).
        emitter: Writes the store templates.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self.emitter = TemplateEmitter(config.project_dir)

    async def run(self, selection: Selection) -> SetupResult:
        """Execute every step for *selection* and report what was written.

        Raises:
            ManifestMissing, ManifestParseError: Before anything is written.
            InstallFailure: After the manifest was updated.
            WriteFailure: After the manifest was updated (and possibly
                after some store files were written).
        """
        manifest = await update_manifest(self.config.manifest_path, REDUX_DEPENDENCIES)

        if self.config.install:
            await install_dependencies(
                self.config.package_manager,
                cwd=self.config.project_dir,
                timeout=self.config.install_timeout,
            )

        files = await self.emitter.emit(selection)

        return SetupResult(
            manifest_path=self.config.manifest_path,
            manifest=manifest,
            installed=self.config.install,
            files=files,
        )
