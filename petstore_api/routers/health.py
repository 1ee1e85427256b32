"""Health endpoint.

- GET /health — service status wrapped in a success envelope
"""

from __future__ import annotations

from fastapi import APIRouter

from petstore_api.models.responses import ApiResponse
from petstore_api.models.status import Status


def create_health_router(*, service_name: str) -> APIRouter:
    """Factory that creates the health router for the named service."""

    health_router = APIRouter(tags=["health"])

    @health_router.get("/health", response_model=ApiResponse[dict[str, str]])
    async def health() -> dict:
        """Service health check."""
        return ApiResponse.success(
            Status.SUCCESS,
            200,
            {"service": service_name, "status": "healthy"},
        ).to_dict()

    return health_router
