from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.config.settings import settings
from src.page.dependencies import get_session_store
from src.page.session import PageSessionStore

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    version: str = "0.1.0"
    mounted_sessions: int
    generation_configured: bool


@router.get("/", response_model=HealthCheckResponse)
async def health_check(
    store: PageSessionStore = Depends(get_session_store),
) -> HealthCheckResponse:
    """
    Health check endpoint to verify the API is running.
    """
    return HealthCheckResponse(
        status="healthy",
        mounted_sessions=len(store),
        generation_configured=bool(settings.GEMINI_API_KEY),
    )
