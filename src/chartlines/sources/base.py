from abc import ABC, abstractmethod


class ChartSource(ABC):
    """Turns a location string into chart text ready for classification.

    Reading and extracting are separate steps so tests can feed a saved
    payload straight into :meth:`extract` without touching disk or network.
    """

    @classmethod
    @abstractmethod
    def can_handle(cls, location: str) -> bool:
        """Tell whether *location* (a path, ``-`` or a URL) belongs to this source."""

    @abstractmethod
    def fetch(self, location: str) -> str:
        """Read *location* and return its decoded payload.

        A location that cannot be read, or whose bytes are not valid text,
        raises FetchError.
        """

    @abstractmethod
    def extract(self, payload: str, location: str) -> str:
        """Pull the chart out of *payload*, with ``\\n`` line endings.

        ParseError signals a payload that holds no chart.
        """

    def load(self, location: str) -> str:
        """Read *location* and return its chart text in one call."""
        payload = self.fetch(location)
        return self.extract(payload, location)
