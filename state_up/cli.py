"""state-up command-line interface.

Usage::

    state-up add redux
    state-up add redux --framework next.js --language typescript
    state-up add redux --package-manager pnpm --skip-install
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.markup import escape
from rich.prompt import Prompt

from state_up import __version__
from state_up.config import Config
from state_up.errors import StateUpError, UnsupportedManager
from state_up.models import Framework, Language, PackageManager, Selection
from state_up.pipeline import ReduxSetup, SetupResult
from state_up.utils import console, print_error, print_files_table, print_success, spinner

SUPPORTED_MANAGERS = ("redux",)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="state-up",
        description="CLI to add state management to your React project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  state-up add redux\n"
            "  state-up add redux --framework next.js --language typescript\n"
            "  state-up add redux --package-manager pnpm\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")
    add = subparsers.add_parser("add", help="Add a state manager to the current project")
    add.add_argument("manager", help="state manager to add (redux)")
    add.add_argument(
        "--framework",
        default=None,
        help=f"Project framework ({' or '.join(Framework.labels())}); asked if omitted",
    )
    add.add_argument(
        "--language",
        default=None,
        help=f"Project language ({' or '.join(Language.labels())}); asked if omitted",
    )
    add.add_argument(
        "--package-manager",
        default=None,
        choices=PackageManager.labels(),
        help="Package manager used to install dependencies (default: npm)",
    )
    add.add_argument(
        "--skip-install",
        action="store_true",
        help="Only edit package.json; do not run the package manager",
    )
    add.add_argument(
        "--project-dir",
        default=None,
        help="Project directory containing package.json (default: current directory)",
    )
    return parser


def check_manager(manager: str) -> None:
    """Raise ``UnsupportedManager`` unless *manager* is Redux (any case)."""
    if manager.lower() not in SUPPORTED_MANAGERS:
        raise UnsupportedManager(manager)


def build_config(args: argparse.Namespace) -> Config:
    """Environment defaults overridden by explicit CLI flags."""
    base = Config.from_env()
    overrides: dict[str, object] = {}
    if args.project_dir:
        overrides["project_dir"] = Path(args.project_dir)
    if args.package_manager:
        overrides["package_manager"] = args.package_manager
    if args.skip_install:
        overrides["install"] = False
    return Config(**{**base.model_dump(), **overrides})


# ---------------------------------------------------------------------------
# Interactive prompts
# ---------------------------------------------------------------------------


def ask_selection(framework: Optional[str] = None, language: Optional[str] = None) -> Selection:
    """Ask for whichever of framework and language was not given on the command line.

    Raises:
        pydantic.ValidationError: If a value given on the command line is not
            a known framework or language.
    """
    if framework is None:
        framework = Prompt.ask(
            "Which framework are you using?",
            choices=Framework.labels(),
            default=Framework.VITE.value,
            console=console,
        )
    if language is None:
        language = Prompt.ask(
            "Which language are you using?",
            choices=Language.labels(),
            default=Language.TYPESCRIPT.value,
            console=console,
        )
    return Selection(framework=framework, language=language)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def print_next_steps(result: SetupResult, config: Config) -> None:
    console.print("\n[bold green]Next steps:[/bold green]")
    if result.installed:
        console.print("1. Dependencies are installed and ready to use")
    else:
        pm = config.package_manager.value
        console.print(f"1. Run {pm} install to install the new dependencies")
    console.print("2. Import and use the Provider component in your root app file")
    console.print("3. Start using Redux in your components!")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def run_add(args: argparse.Namespace) -> int:
    """Handle ``state-up add``; return the process exit status."""
    try:
        check_manager(args.manager)
    except UnsupportedManager as exc:
        print_error(escape(str(exc)))
        return 1

    try:
        config = build_config(args)
        selection = ask_selection(args.framework, args.language)
    except ValueError as exc:
        # pydantic.ValidationError subclasses ValueError
        print_error(escape(str(exc)))
        return 1

    try:
        with spinner("Setting up Redux..."):
            result = asyncio.run(ReduxSetup(config).run(selection))
    except StateUpError as exc:
        print_error("Failed to setup Redux")
        print_error(escape(str(exc)))
        return 1

    print_success("Redux setup completed successfully!")
    print_files_table(result.files, config.project_dir)
    print_next_steps(result, config)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``state-up`` and ``python -m state_up``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    exit_code = run_add(args)
    if exit_code != 0:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
