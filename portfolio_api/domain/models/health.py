from pydantic import BaseModel


class HealthStatus(BaseModel):
    """Liveness report of the API."""
    status: str
    timestamp: str
    version: str
