"""Git repository initialisation for freshly scaffolded projects."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .errors import VCSError

__all__ = ["DEFAULT_COMMIT_MESSAGE", "GitRepository"]


LOGGER = logging.getLogger(__name__)

DEFAULT_COMMIT_MESSAGE = "Initial commit"


@dataclass(slots=True)
class GitRepository:
    """Thin wrapper running ``git`` inside :attr:`path`."""

    path: Path
    executable: str = "git"

    def run(self, *args: str) -> str:
        """Run a git sub-command and return its stripped standard output."""

        command = [self.executable, *args]
        LOGGER.debug("running %s in %s", " ".join(command), self.path)
        try:
            result = subprocess.run(
                command,
                cwd=self.path,
                capture_output=True,
                check=True,
                text=True,
            )
        except FileNotFoundError as exc:
            raise VCSError(
                f"'{self.executable}' was not found; is git installed and on PATH?",
                command=command,
            ) from exc
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or "").strip()
            stdout = (exc.stdout or "").strip()
            reason = stderr or stdout
            detail = f": {reason}" if reason else ""
            raise VCSError(
                f"command '{' '.join(command)}' failed with exit status {exc.returncode}{detail}",
                command=command,
                stderr=stderr,
                stdout=stdout,
            ) from exc
        return result.stdout.strip()

    def initialize(self, message: str = DEFAULT_COMMIT_MESSAGE) -> str:
        """Create the repository, commit every file and return the commit hash.

        Re-running on an existing repository whose files are unchanged makes
        no new commit and returns the current ``HEAD``.
        """

        self.run("init")
        self.run("add", ".")
        if not self.run("status", "--porcelain"):
            LOGGER.debug("nothing to commit in %s", self.path)
            return self.run("rev-parse", "HEAD")
        self.run("commit", "-m", message)
        return self.run("rev-parse", "HEAD")
