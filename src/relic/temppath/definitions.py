"""Fixed constants shared by the name generator and the scoped handle."""

from __future__ import annotations

import string
from enum import Enum

# Length of a generated basename
NAME_LENGTH = 10
# Candidates tried by TempPath.new before giving up
MAX_ATTEMPTS = 10
NAME_ALPHABET = string.ascii_letters + string.digits


class PathKind(int, Enum):
    """What currently lives at a path, as seen by the cleanup logic."""

    MISSING = 0
    FILE = 1
    DIRECTORY = 2
    SYMLINK = 3
    # fifo, socket, device, or the filesystem root itself
    OTHER = 4


__all__ = ["NAME_LENGTH", "MAX_ATTEMPTS", "NAME_ALPHABET", "PathKind"]
