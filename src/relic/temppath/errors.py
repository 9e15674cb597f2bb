"""Errors raised by relic.temppath."""

from __future__ import annotations

from typing import Optional

from relic.core.errors import RelicToolError


class TempPathError(RelicToolError):
    """Base class for all temp path errors."""


class NoAvailableNameError(TempPathError):
    """Every generated candidate already existed on the filesystem.

    Args:
        attempts (int): How many candidate names were generated.
        directory (Optional[str]): The directory the candidates were generated in.
    """

    def __init__(self, attempts: int, directory: Optional[str] = None):
        super().__init__(attempts, directory)
        self.attempts = attempts
        self.directory = directory

    def __str__(self) -> str:
        where = f" in `{self.directory}`" if self.directory is not None else ""
        return f"No names available; all {self.attempts} generated names already exist{where}."


__all__ = ["TempPathError", "NoAvailableNameError"]
