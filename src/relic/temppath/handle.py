"""The scoped temporary path handle."""

from __future__ import annotations

import logging
import os
import tempfile
from types import TracebackType
from typing import Optional, Type

from relic.core.logmsg import BraceMessage

from relic.temppath.cleanup import remove_path
from relic.temppath.definitions import MAX_ATTEMPTS
from relic.temppath.errors import NoAvailableNameError
from relic.temppath.naming import NameSource, make_temp_name
from relic.temppath.probe import StrPath, path_exists

logger = logging.getLogger(__name__)


def _reserve_name(rng: Optional[NameSource] = None) -> str:
    for attempt in range(1, MAX_ATTEMPTS + 1):
        candidate = make_temp_name(rng)
        if path_exists(candidate):
            logger.debug(
                BraceMessage("Temp name `{0}` is taken ({1}/{2})", candidate, attempt, MAX_ATTEMPTS)
            )
            continue
        return candidate
    raise NoAvailableNameError(MAX_ATTEMPTS, tempfile.gettempdir())


class TempPath(os.PathLike):
    """A path that is removed, file or directory, when the handle is closed.

    Nothing is created on disk; the caller creates whatever it likes at
    ``path`` and the handle removes it again. Use it as a context manager, or
    call ``close()`` from a ``finally`` block. A handle that is never closed
    is only cleaned up when it is garbage collected.

    Args:
        path (Optional[StrPath]): Adopt this path instead of generating one.
        rng (Optional[NameSource]): Random source for generated names.

    Raises:
        NoAvailableNameError: No free name was found while generating one.
    """

    def __init__(
        self, path: Optional[StrPath] = None, *, rng: Optional[NameSource] = None
    ):
        self._closed = True
        if path is None:
            self._path = _reserve_name(rng)
            logger.debug(BraceMessage("Reserved temp path `{0}`", self._path))
        else:
            self._path = os.fspath(path)
        self._closed = False

    @classmethod
    def new(cls, rng: Optional[NameSource] = None) -> TempPath:
        """Reserve a random, currently unused path in the OS temp directory."""
        return cls(rng=rng)

    @classmethod
    def adopt(cls, path: StrPath) -> TempPath:
        """Take over cleanup of an existing (or future) path; never fails."""
        return cls(path)

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Remove whatever lives at ``path``. Only the first call does anything."""
        if self._closed:
            return
        self._closed = True
        remove_path(self._path)

    def __fspath__(self) -> str:
        return self._path

    def __enter__(self) -> TempPath:
        if self._closed:
            raise ValueError(f"Cannot enter closed temp path `{self._path}`")
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __del__(self) -> None:
        # __init__ may have raised before the handle owned anything
        if not getattr(self, "_closed", True):
            self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self._path!r}, closed={self._closed})"


__all__ = ["TempPath"]
