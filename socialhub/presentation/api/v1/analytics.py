from fastapi import APIRouter, Depends, Query

from ....application.dtos import SocialTrafficReportDTO, TrackingResultDTO, TrackRequestDTO
from ....application.services import TrafficAttributionService
from ..dependencies import get_attribution_service

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.post(
    "/track",
    response_model=TrackingResultDTO,
    summary="Record a social attribution event",
)
async def track(
    request: TrackRequestDTO,
    service: TrafficAttributionService = Depends(get_attribution_service),
) -> TrackingResultDTO:
    result = await service.track_social_traffic(request.post_id, request.platform, request.website_url)
    return TrackingResultDTO.from_domain(result)


@router.get(
    "/social-traffic",
    response_model=SocialTrafficReportDTO | None,
    summary="Social traffic report",
)
async def social_traffic(
    date_range: str | None = Query(default=None, alias="dateRange"),
    service: TrafficAttributionService = Depends(get_attribution_service),
) -> SocialTrafficReportDTO | None:
    report = await service.get_social_traffic_report(date_range)
    return SocialTrafficReportDTO.from_domain(report) if report else None
