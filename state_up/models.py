"""Pydantic v2 models for the state-up CLI.

Defines the closed choices an operator can make (framework, language,
package manager) and the immutable ``Selection`` that carries them into the
template emitter.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class _ChoiceEnum(str, Enum):
    """String enum that can be looked up by its label, ignoring case."""

    @classmethod
    def parse(cls, value: Any) -> "_ChoiceEnum":
        """Return the member whose value matches *value* case-insensitively.

        Raises:
            ValueError: If *value* is not one of the enum's labels.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__.lower()} '{value}' (expected one of: {choices})")

    @classmethod
    def labels(cls) -> list[str]:
        """Return the display labels in declaration order."""
        return [member.value for member in cls]


class Framework(_ChoiceEnum):
    """Build/runtime flavour of the target React project."""
    VITE = "Vite"
    NEXTJS = "Next.js"

    @property
    def source_root(self) -> str:
        """Directory the store is generated under: ``app`` for Next.js, else ``src``."""
        return "app" if self is Framework.NEXTJS else "src"


class Language(_ChoiceEnum):
    """Source language of the generated store files."""
    TYPESCRIPT = "TypeScript"
    JAVASCRIPT = "JavaScript"

    @property
    def extension(self) -> str:
        return ".ts" if self is Language.TYPESCRIPT else ".js"

    @property
    def component_extension(self) -> str:
        """Extension for files that contain JSX markup (``.tsx`` / ``.jsx``)."""
        return f"{self.extension}x"


class PackageManager(_ChoiceEnum):
    """Package manager used to install the added dependencies."""
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @property
    def install_command(self) -> list[str]:
        return [self.value, "install"]


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

class Selection(BaseModel):
    """The operator's framework and language choice for a single run."""

    model_config = ConfigDict(frozen=True)

    framework: Framework = Field(..., description="Target project framework")
    language: Language = Field(..., description="Language of the generated files")

    @field_validator("framework", mode="before")
    @classmethod
    def _parse_framework(cls, value: Any) -> Framework:
        return Framework.parse(value)

    @field_validator("language", mode="before")
    @classmethod
    def _parse_language(cls, value: Any) -> Language:
        return Language.parse(value)
