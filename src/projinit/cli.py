"""Command line interface for the project initializer."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .config import ProjectConfig
from .errors import ScaffoldError
from .scaffold import ProjectScaffolder
from .template import TemplateRenderer

LOGGER = logging.getLogger(__name__)

NEXT_STEPS = """
Next steps:
  cd {name}
  python -m venv .venv
  source .venv/bin/activate
  pip install -e ".[dev]"
  pytest
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projinit",
        description="Create a new src-layout Python project with tests, docs and a git repository",
    )
    parser.add_argument("name", help="Name of the project directory and distribution")
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path("."),
        help="Parent directory in which the project directory is created",
    )
    parser.add_argument(
        "--package",
        help="Override the package name derived from the project name",
    )
    parser.add_argument(
        "--no-git",
        dest="init_git",
        action="store_false",
        help="Skip creating a git repository and the initial commit",
    )
    parser.add_argument(
        "--no-clobber",
        dest="overwrite",
        action="store_false",
        help="Fail instead of overwriting files that already exist",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every directory, file and git command to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = ProjectConfig.from_name(args.name, package=args.package)
        scaffolder = ProjectScaffolder(TemplateRenderer())
        result = scaffolder.create(
            config,
            args.directory,
            overwrite=args.overwrite,
            init_vcs=args.init_git,
            progress=print,
        )
    except ScaffoldError as exc:
        LOGGER.debug("scaffolding aborted", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if result.commit:
        print(f"Git repository at commit {result.commit[:7]}")
    print(f"Project {config.name} created at {result.project_path}")
    print(NEXT_STEPS.format(name=config.name), end="")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
