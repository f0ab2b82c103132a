from fastapi import APIRouter, Depends

from ....application.services import AdsService, UnifiedPublisher
from ....config import settings
from ..dependencies import get_ads_service, get_publisher

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
async def health() -> dict:
    """Basic health check for load balancer."""
    return {"status": "healthy"}


@router.get("/health/ready", summary="Readiness check")
async def readiness(
    publisher: UnifiedPublisher = Depends(get_publisher),
    ads: AdsService = Depends(get_ads_service),
) -> dict:
    """Report the configured platform families and attribution backend."""
    return {
        "status": "ready",
        "platforms": {
            "core": publisher.core.platforms,
            "additional": publisher.extended.platforms,
            "ads": ads.platforms,
        },
        "attribution": "ga4" if settings.ga4_enabled else "in_memory",
    }
