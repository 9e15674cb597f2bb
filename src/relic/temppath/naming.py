from __future__ import annotations

import os
import random
import tempfile
from typing import Optional, Protocol, Sequence, List

from relic.temppath.definitions import NAME_ALPHABET, NAME_LENGTH


class NameSource(Protocol):
    """Anything with ``random.Random.choices``; the ``random`` module itself qualifies."""

    def choices(self, population: Sequence[str], *, k: int) -> List[str]:
        raise NotImplementedError


def make_temp_basename(rng: Optional[NameSource] = None) -> str:
    """Generate a random basename of ``NAME_LENGTH`` ASCII letters and digits.

    Not suitable for anything security sensitive; the default source is the
    module level ``random`` PRNG.
    """
    source = rng if rng is not None else random
    return "".join(source.choices(NAME_ALPHABET, k=NAME_LENGTH))


def make_temp_name(rng: Optional[NameSource] = None) -> str:
    """Join the OS temp directory with a fresh random basename.

    Nothing is created on disk.

    :rtype: str
    :returns: An absolute path string.
    """
    return os.path.join(tempfile.gettempdir(), make_temp_basename(rng))


__all__ = ["NameSource", "make_temp_basename", "make_temp_name"]
