from fastapi import APIRouter, Depends

from portfolio_api.config.settings import Settings, get_settings
from portfolio_api.domain.models.health import HealthStatus
from portfolio_api.domain.usecases.health.get_health_status import GetHealthStatusUseCase
from portfolio_api.presentation.routes.router import DefaultRouter

router = APIRouter(route_class=DefaultRouter)


@router.get('/health', summary='Check that the API is up', response_model=HealthStatus)
def health_check(settings: Settings = Depends(get_settings)):
    use_case = GetHealthStatusUseCase(settings.app_version)
    return use_case.execute()
