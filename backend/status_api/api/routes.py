"""Status route definitions."""

from fastapi import APIRouter

from status_api.models.status import HEALTH, HELLO, HealthResponse, HelloResponse

status_router = APIRouter()


@status_router.get("/health", response_model=HealthResponse, summary="Health probe")
async def health() -> HealthResponse:
    """Report that the backend is up."""

    return HEALTH


@status_router.get("/hello", response_model=HelloResponse, summary="Greeting")
async def hello() -> HelloResponse:
    return HELLO
