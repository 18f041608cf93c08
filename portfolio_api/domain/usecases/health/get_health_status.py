from portfolio_api.domain.models.health import HealthStatus
from portfolio_api.utils.formatting import utc_timestamp


class GetHealthStatusUseCase:
    """Use case for reporting that the service is up."""

    def __init__(self, version: str):
        self.version = version

    def execute(self) -> HealthStatus:
        return HealthStatus(status='OK', timestamp=utc_timestamp(), version=self.version)
