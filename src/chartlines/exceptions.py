class ChartlinesError(Exception):
    """Base exception for chartlines."""


class FetchError(ChartlinesError):
    """Raised when a chart cannot be read from its location."""

    def __init__(self, location: str, status_code: int):
        self.location = location
        self.status_code = status_code
        if status_code:
            super().__init__(f"HTTP {status_code} fetching {location}")
        else:
            super().__init__(f"Could not read {location}")


class ParseError(ChartlinesError):
    """Raised when chart text cannot be extracted from a fetched page."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Parse error for {location}: {reason}")


class UnsupportedSourceError(ChartlinesError):
    """Raised when no source matches the given location."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"No source found for location: {location}")


class UnsupportedFormatError(ChartlinesError):
    """Raised when no renderer is registered under the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No renderer for format: {name}")


class ConfigError(ChartlinesError):
    """Raised when a classifier configuration file is invalid."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")
