from typing import Optional

import pytest
from relic.core.errors import RelicToolError

from relic.temppath.errors import NoAvailableNameError, TempPathError


@pytest.mark.parametrize("attempts", [0, 10])
@pytest.mark.parametrize("directory", [None, "/tmp"])
class TestNoAvailableNameError:
    def test_init(self, attempts: int, directory: Optional[str]):
        err = NoAvailableNameError(attempts, directory)
        assert err.attempts == attempts
        assert err.directory == directory

    def test_str(self, attempts: int, directory: Optional[str]):
        result = str(NoAvailableNameError(attempts, directory))
        assert isinstance(result, str)
        assert str(attempts) in result
        if directory is not None:
            assert directory in result

    def test_hierarchy(self, attempts: int, directory: Optional[str]):
        err = NoAvailableNameError(attempts, directory)
        assert isinstance(err, TempPathError)
        assert isinstance(err, RelicToolError)
