from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Tuple, Union

from fs import ResourceType, errors
from fs.base import FS
from fs.osfs import OSFS

from relic.temppath.definitions import PathKind

StrPath = Union[str, "os.PathLike[str]"]


def split_path(path: StrPath) -> Tuple[str, str]:
    """Split a path into its absolute parent directory and its basename.

    The basename is empty when the path is a filesystem root.
    """
    return os.path.split(os.path.abspath(os.fspath(path)))


def _names_directory(raw: str) -> bool:
    # "file/" names a directory; it must not resolve to "file"
    return raw.endswith(os.sep) or bool(os.altsep and raw.endswith(os.altsep))


@contextmanager
def open_parent(path: StrPath) -> Iterator[Tuple[FS, str, bool]]:
    """Open the parent directory of ``path`` as an OSFS.

    Yields the parent filesystem, the name of ``path`` inside it, and whether
    ``path`` carried a trailing separator (and so may only name a directory).
    Raises ``fs.errors.ResourceNotFound`` for an empty path and
    ``fs.errors.CreateFailed`` if the parent is not an existing directory.
    """
    raw = os.fspath(path)
    if not raw:
        # abspath("") would be the working directory
        raise errors.ResourceNotFound(raw)
    parent, name = split_path(raw)
    # Variables in adopted paths are literal text; never expand them
    with OSFS(parent, expand_vars=False) as parent_fs:
        yield parent_fs, name, _names_directory(raw)


def classify_in(parent_fs: FS, name: str, directory_only: bool = False) -> PathKind:
    if not name:
        return PathKind.OTHER
    # exists() follows symlinks; a dangling link is MISSING
    if not parent_fs.exists(name):
        return PathKind.MISSING
    if directory_only and not parent_fs.isdir(name):
        return PathKind.MISSING
    if parent_fs.islink(name):
        return PathKind.SYMLINK
    resource_type = parent_fs.gettype(name)
    if resource_type == ResourceType.directory:
        return PathKind.DIRECTORY
    if resource_type == ResourceType.file:
        return PathKind.FILE
    return PathKind.OTHER


def classify(path: StrPath) -> PathKind:
    """Determine what currently lives at ``path``.

    An empty path, a path whose parent can't be opened, or one which can't be
    inspected, is MISSING.
    """
    try:
        with open_parent(path) as (parent_fs, name, directory_only):
            return classify_in(parent_fs, name, directory_only)
    except errors.FSError:
        return PathKind.MISSING


def path_exists(path: StrPath) -> bool:
    """Check whether any filesystem object exists at ``path``.

    Racy by nature; the answer may be stale by the time the caller acts on it.
    """
    return classify(path) != PathKind.MISSING


__all__ = ["StrPath", "split_path", "open_parent", "classify_in", "classify", "path_exists"]
