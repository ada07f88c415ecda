"""Package-manager invocation."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from state_up.errors import InstallFailure
from state_up.models import PackageManager
from state_up.utils import format_command, run_command


async def install_dependencies(
    package_manager: PackageManager,
    cwd: str | Path,
    timeout: Optional[float] = None,
) -> str:
    """Install the dependencies declared in the project's manifest.

    Blocks until the package manager exits; *timeout* is ``None`` by default
    so a slow install is never cut short.

    Returns:
        The package manager's captured stdout.

    Raises:
        InstallFailure: If the executable cannot be started, exits non-zero,
            or exceeds *timeout*.
    """
    cmd = package_manager.install_command
    shown = format_command(cmd)
    try:
        returncode, stdout, stderr = await run_command(cmd, cwd=cwd, timeout=timeout)
    except OSError as exc:
        raise InstallFailure(shown, exc.strerror or str(exc)) from exc

    if returncode != 0:
        detail = _last_line(stderr) or _last_line(stdout) or f"exit code {returncode}"
        raise InstallFailure(shown, detail)
    return stdout


def _last_line(text: str) -> str:
    lines = [line for line in text.splitlines() if line.strip()]
    return lines[-1].strip() if lines else ""
