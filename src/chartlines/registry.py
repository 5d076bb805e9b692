from .exceptions import UnsupportedSourceError
from .sources.base import ChartSource
from .sources.local import FileSource
from .sources.web import WebSource

# Checked in order; FileSource accepts any location without a scheme.
_SOURCES: list[type[ChartSource]] = [
    WebSource,
    FileSource,
]


def get_source(location: str) -> ChartSource:
    """Pick the first source that accepts *location* and return a fresh one.

    Locations with a scheme other than http(s) raise UnsupportedSourceError.
    """
    for cls in _SOURCES:
        if cls.can_handle(location):
            return cls()
    raise UnsupportedSourceError(location)
