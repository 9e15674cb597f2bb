import os
from typing import Iterable, List, Sequence


class ScriptedNames:
    """A name source that hands out pre-chosen basenames, one per call."""

    def __init__(self, names: Iterable[str]):
        self._names = list(names)
        self.calls = 0

    def choices(self, population: Sequence[str], *, k: int) -> List[str]:
        name = self._names[self.calls % len(self._names)]
        self.calls += 1
        assert len(name) == k
        return list(name)


def write_file(path: str, data: bytes = b"For the Emperor!") -> str:
    with open(path, "xb") as h:
        h.write(data)
    return path


def make_tree(path: str) -> str:
    """Create a directory with a nested file and a nested sub-directory."""
    os.mkdir(path)
    write_file(os.path.join(path, "top.txt"))
    nested = os.path.join(path, "nested", "deeper")
    os.makedirs(nested)
    write_file(os.path.join(nested, "bottom.bin"), b"\x00\x01\x02")
    return path
