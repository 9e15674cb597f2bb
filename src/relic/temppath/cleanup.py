from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Tuple

from fs import errors
from fs.base import FS
from fs.path import join
from relic.core.logmsg import BraceMessage

from relic.temppath.definitions import PathKind
from relic.temppath.probe import StrPath, classify_in, open_parent

logger = logging.getLogger(__name__)


def _remove_tree(target_fs: FS, dir_path: str) -> None:
    # Explicit stack; directories are removed after their children
    pending: Deque[Tuple[str, bool]] = deque([(dir_path, False)])
    while pending:
        current, emptied = pending.pop()
        if emptied:
            target_fs.removedir(current)
            continue
        pending.append((current, True))
        # Links are removed as entries; their targets are never walked into
        for info in target_fs.scandir(current, namespaces=["link"]):
            child = join(current, info.name)
            if info.is_dir and not info.is_link:
                pending.append((child, False))
            else:
                target_fs.remove(child)


def remove_path(path: StrPath) -> bool:
    """Best-effort removal of whatever lives at ``path``.

    Files and symlinks are unlinked, directories are removed recursively,
    anything else (fifos, sockets, devices) is left alone. Failures are
    swallowed; this never raises for filesystem errors.

    :rtype: bool
    :returns: True if something was removed.
    """
    try:
        with open_parent(path) as (parent_fs, name, directory_only):
            kind = classify_in(parent_fs, name, directory_only)
            if kind in (PathKind.FILE, PathKind.SYMLINK):
                parent_fs.remove(name)
            elif kind == PathKind.DIRECTORY:
                _remove_tree(parent_fs, name)
            else:
                return False
    except (errors.FSError, OSError):
        return False
    logger.debug(BraceMessage("Removed {0} `{1}`", kind.name.lower(), path))
    return True


__all__ = ["remove_path"]
