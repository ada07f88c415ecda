"""Dependency manifest updater.

Reads the target project's ``package.json``, merges the Redux dependency
pair into its ``dependencies`` mapping and writes the file back in place.
Every other key, and the order of existing keys, is left untouched.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from state_up.errors import ManifestMissing, ManifestParseError, WriteFailure
from state_up.utils import load_json, save_json

DEPENDENCIES_KEY = "dependencies"

REDUX_DEPENDENCIES: dict[str, str] = {
    "@reduxjs/toolkit": "^2.0.1",
    "react-redux": "^9.0.4",
}


def merge_dependencies(
    manifest: dict[str, Any], additions: Mapping[str, str]
) -> dict[str, Any]:
    """Return a copy of *manifest* with *additions* merged into ``dependencies``.

    Existing entries keep their position; an addition with a name that is
    already present overwrites the version in place. New names are appended
    in the order given. A missing ``dependencies`` key is created at the end
    of the manifest.
    """
    merged = dict(manifest)
    current = merged.get(DEPENDENCIES_KEY)
    if current is None:
        current = {}
    dependencies = dict(current)
    dependencies.update(additions)
    merged[DEPENDENCIES_KEY] = dependencies
    return merged


def read_manifest(path: Path) -> dict[str, Any]:
    """Load and validate the manifest at *path*.

    Raises:
        ManifestMissing: If *path* does not exist.
        ManifestParseError: If the file is not valid JSON, its root is not an
            object, or ``dependencies`` is present but not an object.
    """
    if not path.is_file():
        raise ManifestMissing(path)

    try:
        data = load_json(path)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestParseError(path, str(exc)) from exc

    if not isinstance(data, dict):
        raise ManifestParseError(path, "top-level value must be an object")
    dependencies = data.get(DEPENDENCIES_KEY)
    if dependencies is not None and not isinstance(dependencies, dict):
        raise ManifestParseError(path, f"'{DEPENDENCIES_KEY}' must be an object")
    return data


async def update_manifest(
    path: Path, additions: Mapping[str, str] = REDUX_DEPENDENCIES
) -> dict[str, Any]:
    """Merge *additions* into the manifest at *path* and write it back.

    The file is replaced wholesale with 2-space indentation. Nothing is
    written if reading or parsing fails.

    Returns:
        The manifest as written.

    Raises:
        ManifestMissing, ManifestParseError: See :func:`read_manifest`.
        WriteFailure: If the updated manifest cannot be written.
    """
    manifest = read_manifest(path)
    updated = merge_dependencies(manifest, additions)
    try:
        await save_json(updated, path)
    except OSError as exc:
        raise WriteFailure(path, exc.strerror or str(exc)) from exc
    return updated
