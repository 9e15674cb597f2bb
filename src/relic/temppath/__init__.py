"""
Scoped temporary paths; a reserved path under the temp directory that is removed when its handle closes
"""
from relic.temppath.definitions import PathKind
from relic.temppath.errors import NoAvailableNameError, TempPathError
from relic.temppath.handle import TempPath
from relic.temppath.naming import make_temp_name
from relic.temppath.probe import path_exists

__version__ = "1.0.0"

__all__ = [
    "TempPath",
    "TempPathError",
    "NoAvailableNameError",
    "PathKind",
    "make_temp_name",
    "path_exists",
]
