"""Project scaffolding helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .config import ProjectConfig
from .errors import FilesystemError
from .schema import ScaffoldResult, TemplateFile
from .template import TemplateRenderer
from .vcs import DEFAULT_COMMIT_MESSAGE, GitRepository

__all__ = ["ProjectScaffolder", "file_catalog"]


LOGGER = logging.getLogger(__name__)


MAIN_TEMPLATE = '''"""Main module for {{ name }}."""


def example_function(text: str) -> str:
    """Return a friendly greeting.

    Args:
        text: The name or phrase to greet.

    Returns:
        The greeting message.
    """
    return f"Hello, {text}!"
'''

TEST_TEMPLATE = """from {{ package_name }}.main import example_function


def test_example_function():
    assert example_function("World") == "Hello, World!"
"""

DOCS_TEMPLATE = "# {{ name }}\n"

README_TEMPLATE = """# {{ name }}

A short description of {{ name }}.

## Installation

```bash
python -m venv .venv
source .venv/bin/activate
pip install -e ".[dev]"
```

## Usage

```python
from {{ package_name }}.main import example_function

print(example_function("World"))
```

## Development

- Add runtime dependencies to `requirements.in` and compile them with `pip-compile`.
- Run the test-suite with `pytest`.
- Source code lives in `src/{{ package_name }}/`, tests in `tests/`, documentation in `docs/`.
"""

GITIGNORE_TEMPLATE = """# Byte-compiled files and caches
__pycache__/
*.py[cod]
.pytest_cache/
.mypy_cache/
.ruff_cache/
.coverage
htmlcov/

# Virtual environments
.venv/
venv/
env/

# Build artifacts
build/
dist/
*.egg-info/

# IDE folders
.idea/
.vscode/

# Environment files
.env
"""

PYPROJECT_TEMPLATE = """[build-system]
requires = ["setuptools>=61.0", "wheel"]
build-backend = "setuptools.build_meta"

[project]
name = {{ name|toml }}
version = "0.1.0"
description = "A short description of the project."
readme = "README.md"
requires-python = ">=3.10"
dependencies = []

[project.optional-dependencies]
dev = ["pytest"]

[tool.setuptools]
package-dir = {"" = "src"}
packages = [{{ package_name|toml }}]

[tool.pytest.ini_options]
testpaths = ["tests"]
"""

REQUIREMENTS_TEMPLATE = """# Direct project dependencies, one per line.
# Compile a pinned requirements.txt with: pip-compile requirements.in
"""


def file_catalog(config: ProjectConfig) -> list[TemplateFile]:
    """Return the files written for ``config`` in emission order."""

    package_dir = f"src/{config.package}"
    return [
        TemplateFile(path=f"{package_dir}/__init__.py"),
        TemplateFile(path=f"{package_dir}/main.py", template=MAIN_TEMPLATE),
        TemplateFile(path="tests/__init__.py"),
        TemplateFile(path="tests/test_main.py", template=TEST_TEMPLATE),
        TemplateFile(path="docs/index.md", template=DOCS_TEMPLATE),
        TemplateFile(path="README.md", template=README_TEMPLATE),
        TemplateFile(path=".gitignore", template=GITIGNORE_TEMPLATE),
        TemplateFile(path="pyproject.toml", template=PYPROJECT_TEMPLATE),
        TemplateFile(path="requirements.in", template=REQUIREMENTS_TEMPLATE),
    ]


@dataclass(slots=True)
class ProjectScaffolder:
    """Create a minimal src-layout Python project."""

    renderer: TemplateRenderer

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def project_path(self, config: ProjectConfig, parent_dir: str | Path) -> Path:
        return Path(parent_dir).expanduser().resolve() / config.name

    def build_directories(self, config: ProjectConfig, project_path: Path) -> list[str]:
        """Create the project root and its ``src``, ``tests`` and ``docs`` folders."""

        directories = [f"src/{config.package}", "tests", "docs"]
        for relative in ["", *directories]:
            destination = project_path / relative
            try:
                destination.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise FilesystemError(
                    f"could not create directory {destination}: {exc.strerror or exc}",
                    path=destination,
                ) from exc
            LOGGER.debug("ensured directory %s", destination)
        return directories

    def emit_files(
        self,
        config: ProjectConfig,
        project_path: Path,
        *,
        overwrite: bool = True,
    ) -> list[str]:
        """Render the file catalog into ``project_path``.

        Existing files are replaced unless ``overwrite`` is ``False``, in which
        case the first existing destination aborts the run. Files written
        before a failure are left in place.
        """

        context = config.context()
        written: list[str] = []
        for entry in file_catalog(config):
            destination = project_path / entry.path
            if destination.exists():
                if not overwrite:
                    raise FilesystemError(f"{destination} already exists", path=destination)
                LOGGER.debug("overwriting %s", destination)

            rendered = self.renderer.render_string(entry.template, context, missing="error")
            try:
                destination.write_text(rendered, encoding="utf-8")
            except OSError as exc:
                raise FilesystemError(
                    f"could not write {destination}: {exc.strerror or exc}",
                    path=destination,
                ) from exc
            LOGGER.debug("wrote %s", destination)
            written.append(entry.path)
        return written

    def create(
        self,
        config: ProjectConfig,
        parent_dir: str | Path,
        *,
        overwrite: bool = True,
        init_vcs: bool = True,
        commit_message: str = DEFAULT_COMMIT_MESSAGE,
        progress: Callable[[str], None] | None = None,
    ) -> ScaffoldResult:
        """Scaffold the project described by ``config`` inside ``parent_dir``.

        The stages run in order (directories, files, git) and the first
        failure propagates without undoing earlier stages. ``progress`` is
        called with a short message as each stage starts.
        """

        report = progress or (lambda message: None)
        project_path = self.project_path(config, parent_dir)

        report(f"Creating directory structure in {project_path}")
        directories = self.build_directories(config, project_path)

        report("Writing project files")
        files = self.emit_files(config, project_path, overwrite=overwrite)

        commit = None
        if init_vcs:
            report("Initializing git repository")
            commit = GitRepository(project_path).initialize(commit_message)
            LOGGER.debug("repository HEAD is %s", commit)

        return ScaffoldResult(
            project_path=project_path,
            package=config.package,
            directories=directories,
            files=files,
            commit=commit,
        )
