"""Validated records describing the generated project."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TemplateFile(BaseModel):
    """A single entry of the file catalog written into a new project."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., description="POSIX style path relative to the project root.")
    template: str = Field(default="", description="Template text rendered into the file.")

    @field_validator("path")
    @classmethod
    def _relative_path(cls, value: str) -> str:
        candidate = PurePosixPath(value)
        if not value or candidate.is_absolute() or ".." in candidate.parts:
            raise ValueError(f"'{value}' must be a relative path inside the project")
        return value


class ScaffoldResult(BaseModel):
    """Summary of a completed scaffolding run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_path: Path = Field(..., description="Absolute path of the project root.")
    package: str = Field(..., description="Import package created under src/.")
    directories: List[str] = Field(default_factory=list, description="Directories ensured, relative to the project root.")
    files: List[str] = Field(default_factory=list, description="Files written, in emission order.")
    commit: str | None = Field(None, description="Hash of the initial commit, if a repository was created.")


__all__ = ["ScaffoldResult", "TemplateFile"]
