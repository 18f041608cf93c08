from typing import List

from portfolio_api.domain.models.portfolio import HistoryEntry
from portfolio_api.domain.repositories.history_repository import HistoryRepository


class GetPortfolioHistoryUseCase:
    """Use case for listing past portfolio calculations, newest first."""

    def __init__(self, history_repository: HistoryRepository):
        self.repository = history_repository

    def execute(self) -> List[HistoryEntry]:
        return self.repository.read_all()
