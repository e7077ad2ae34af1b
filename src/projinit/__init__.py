"""Create new Python projects from a single name.

The package derives an import name from the project name, writes a small
src-layout project (package, example module, tests, docs, packaging files)
and records it in a fresh git repository. It can be used programmatically
through :class:`ProjectScaffolder` or via the ``projinit`` command.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ProjectConfig
from .errors import FilesystemError, ScaffoldError, TemplateRenderingError, UsageError, VCSError
from .naming import derive_package_name, is_importable_name
from .scaffold import ProjectScaffolder, file_catalog
from .schema import ScaffoldResult, TemplateFile
from .template import TemplateRenderer
from .vcs import GitRepository

__all__ = [
    "FilesystemError",
    "GitRepository",
    "ProjectConfig",
    "ProjectScaffolder",
    "ScaffoldError",
    "ScaffoldResult",
    "TemplateFile",
    "TemplateRenderer",
    "TemplateRenderingError",
    "UsageError",
    "VCSError",
    "derive_package_name",
    "file_catalog",
    "is_importable_name",
]
