"""Run ``git clone`` for the exporter."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Protocol

from .errors import CloneError


class Cloner(Protocol):
    def clone(self, url: str, destination: Path) -> int: ...


class GitClient:
    def __init__(self, git: str = "git") -> None:
        self.git = git

    def clone_command(self, url: str) -> list[str]:
        # empty credential.helper: fail fast instead of prompting mid-batch
        return [self.git, "-c", "credential.helper=", "clone", url]

    def clone(self, url: str, destination: Path) -> int:
        """Clone ``url`` inside ``destination`` and return git's exit status."""
        try:
            proc = subprocess.run(self.clone_command(url), cwd=destination)
        except OSError as e:
            raise CloneError(url, str(e)) from e
        return proc.returncode
