"""Exception types raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

__all__ = [
    "FilesystemError",
    "ScaffoldError",
    "TemplateRenderingError",
    "UsageError",
    "VCSError",
]


class ScaffoldError(RuntimeError):
    """Base class for failures that abort a scaffolding run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UsageError(ScaffoldError):
    """Raised when the caller supplies an unusable project or package name."""


class FilesystemError(ScaffoldError):
    """Raised when a directory or file cannot be created."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class VCSError(ScaffoldError):
    """Raised when git is unavailable or one of its commands fails."""

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        stderr: str = "",
        stdout: str = "",
    ) -> None:
        super().__init__(message)
        self.command = tuple(command)
        self.stderr = stderr
        self.stdout = stdout


class TemplateRenderingError(ScaffoldError):
    """Raised when the renderer cannot evaluate a placeholder."""
