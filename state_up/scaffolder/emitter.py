"""Writes the Redux store files into the target project.

The output root depends on the framework (``app/`` for Next.js, ``src/``
otherwise); the files go into its ``store/`` subdirectory.  Existing files
are overwritten without warning.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from state_up.config import STORE_DIRNAME
from state_up.errors import DirectoryCreateError, WriteFailure
from state_up.models import Framework, Language, Selection
from state_up.utils import ensure_dir, write_text_file

from .templates import render_templates


class TemplateEmitter:
    """Emit the fixed store templates for a framework/language selection."""

    def __init__(self, project_dir: str | Path) -> None:
        self.project_dir = Path(project_dir)

    def store_dir(self, framework: Framework) -> Path:
        return self.project_dir / framework.source_root / STORE_DIRNAME

    async def emit(self, selection: Selection) -> list[Path]:
        """Write every store file for *selection*.

        Returns:
            The written paths, in write order.

        Raises:
            DirectoryCreateError: If the store directory cannot be created.
            WriteFailure: If any file cannot be written.  Files written
                before the failure are left in place.
        """
        store_dir = self.store_dir(selection.framework)
        try:
            await asyncio.to_thread(ensure_dir, store_dir)
        except OSError as exc:
            raise DirectoryCreateError(store_dir, exc.strerror or str(exc)) from exc

        written: list[Path] = []
        for filename, content in render_templates(selection.language).items():
            target = store_dir / filename
            try:
                await asyncio.to_thread(write_text_file, target, content)
            except OSError as exc:
                raise WriteFailure(target, exc.strerror or str(exc)) from exc
            written.append(target)
        return written


async def emit(project_dir: str | Path, language: Language, framework: Framework) -> list[Path]:
    """Convenience wrapper around :meth:`TemplateEmitter.emit`."""
    selection = Selection(framework=framework, language=language)
    return await TemplateEmitter(project_dir).emit(selection)
