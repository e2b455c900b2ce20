"""Health check endpoint with credential store connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from wisata.api.deps import get_app_settings
from wisata.core.config import Settings
from wisata.core.database import check_db_connected, get_db
from wisata.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    app_settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Flags the development signing secret so deployments using it are visible.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=app_settings.APP_ENV,
        database=db_status,
        insecure_secret=app_settings.uses_insecure_jwt_secret,
    )
