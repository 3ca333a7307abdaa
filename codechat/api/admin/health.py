"""Health check endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from codechat.api.deps import AdminAuth, MessengerDep

router = APIRouter()


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    timestamp: str


class StoreHealth(BaseModel):
    """Sizes of the in-memory stores and how long their locks took to acquire."""

    users: int
    friendships: int
    messages: int
    lock_latency_ms: float


class DetailedHealthResponse(BaseModel):
    """Detailed health check response with store statistics."""

    status: str
    timestamp: str
    stores: StoreHealth


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/health/detailed", response_model=DetailedHealthResponse)
async def detailed_health_check(
    messenger: MessengerDep,
    _auth: AdminAuth,
) -> DetailedHealthResponse:
    """Detailed health check with store sizes."""
    start = time.perf_counter()
    counts = messenger.counts()
    latency = (time.perf_counter() - start) * 1000

    return DetailedHealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        stores=StoreHealth(**counts, lock_latency_ms=round(latency, 2)),
    )
