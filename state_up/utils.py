"""Shared utility functions for state-up.

Provides async command execution, order-preserving JSON I/O, file-system
helpers and Rich-based console output.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.status import Status
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: Optional[float] = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously, capturing its output.

    Args:
        cmd: Executable and its arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits until the process exits.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.

    Raises:
        OSError: If the executable cannot be started.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (
            -1,
            "",
            f"Command timed out after {timeout}s: {format_command(cmd)}",
        )

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


def format_command(cmd: list[str]) -> str:
    """Render a command for display."""
    return " ".join(cmd)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Object key order is preserved (``dict`` keeps insertion order). A leading
    UTF-8 byte-order mark is ignored.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8-sig")
    return json.loads(raw)


def dump_json(data: Any) -> str:
    """Serialise *data* with 2-space indentation and a trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON, replacing the file wholesale.

    The write is performed in a worker thread to avoid blocking the event
    loop.
    """
    file_path = Path(path)
    content = dump_json(data)
    await asyncio.to_thread(file_path.write_text, content, "utf-8")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text_file(path: Path, content: str) -> None:
    """Synchronous helper: write *content*, replacing any existing file."""
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def spinner(message: str) -> Status:
    """Return a Rich status spinner, usable as a context manager."""
    return console.status(f"[bold cyan]{message}[/bold cyan]", spinner="dots")


def print_files_table(paths: list[Path], root: Path, title: str = "Generated files") -> None:
    """Print the generated files relative to *root*."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("File", no_wrap=True)

    for path in paths:
        try:
            shown = path.relative_to(root)
        except ValueError:
            shown = path
        table.add_row(shown.as_posix())

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")
