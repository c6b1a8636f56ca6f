"""Lint errors. Content problems are Issues, never exceptions."""

from pathlib import Path
from typing import Union


class LintIOError(OSError):
    """The config bytes could not be read."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
