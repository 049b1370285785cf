from fastapi import APIRouter, Depends

from app.config import Settings, database_name
from app.dependencies import current_settings
from app.models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(settings: Settings = Depends(current_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=settings.app_version,
        database=database_name(settings.mongodb_uri),
    )
