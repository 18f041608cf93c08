from abc import ABC, abstractmethod
from typing import List

from portfolio_api.domain.models.portfolio import HistoryEntry


class HistoryRepository(ABC):
    """Interface for the bounded, newest-first log of portfolio calculations."""

    @abstractmethod
    def load(self) -> List[HistoryEntry]:
        """Read the stored history; absent or corrupt storage reads as empty."""
        pass

    @abstractmethod
    def append(self, entry: HistoryEntry) -> None:
        """Prepend an entry and drop the oldest past the limit. Never raises."""
        pass

    def read_all(self) -> List[HistoryEntry]:
        """Full history for the retrieval endpoint."""
        return self.load()
