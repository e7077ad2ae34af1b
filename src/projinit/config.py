"""Configuration describing the project to scaffold."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import UsageError
from .naming import derive_package_name, is_importable_name

_PATH_SEPARATORS = {"/", os.sep, os.altsep} - {None}


@dataclass(slots=True)
class ProjectConfig:
    """Identifiers for a new project.

    Attributes
    ----------
    name:
        The project name given by the user. It is kept verbatim and used as
        the root directory name, the distribution name in ``pyproject.toml``
        and the title of the generated documentation.
    package:
        The import package placed under ``src/``. Unless overridden it is
        :attr:`name` with hyphens replaced by underscores.
    """

    name: str
    package: str

    @classmethod
    def from_name(cls, name: str, *, package: str | None = None) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` from the name passed on the command line.

        Parameters
        ----------
        name:
            The project name. It must contain at least one non-whitespace
            character.
        package:
            Optionally override the derived package name. An override has to
            be a valid, non-keyword Python identifier.
        """

        if not name or not name.strip():
            raise UsageError("project name must not be empty")
        if name in {".", ".."} or any(separator in name for separator in _PATH_SEPARATORS):
            raise UsageError(f"project name '{name}' must be a single directory name")

        if package is not None:
            if not is_importable_name(package):
                raise UsageError(f"package name '{package}' is not a valid Python identifier")
            package_name = package
        else:
            package_name = derive_package_name(name)

        return cls(name=name, package=package_name)

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "name": self.name,
            "package_name": self.package,
        }
