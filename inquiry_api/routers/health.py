# inquiry_api/routers/health.py
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from inquiry_api.config import Settings
from inquiry_api.deps import get_app_settings
from inquiry_api.schemas import HealthOut

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(settings: Settings = Depends(get_app_settings)):
    return HealthOut(
        status="OK",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        environment=settings.ENV,
    )
