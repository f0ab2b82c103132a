from fastapi import APIRouter, Depends

from ....application.dtos import (
    AdMetricsDTO,
    AdMetricsRequestDTO,
    CampaignDTO,
    CampaignsRequestDTO,
    ConsolidatedMetricsDTO,
    ConsolidatedRequestDTO,
)
from ....application.services import AdsService
from ....application.services.ads_service import DEFAULT_DATE_RANGE
from ..dependencies import get_ads_service

router = APIRouter(prefix="/ads", tags=["ads"])


@router.post(
    "/metrics",
    response_model=AdMetricsDTO | None,
    summary="Ad account metrics",
)
async def account_metrics(
    request: AdMetricsRequestDTO,
    service: AdsService = Depends(get_ads_service),
) -> AdMetricsDTO | None:
    metrics = await service.get_account_metrics(
        request.account.to_domain(),
        request.date_range or DEFAULT_DATE_RANGE,
    )
    return AdMetricsDTO.from_domain(metrics) if metrics else None


@router.post(
    "/campaigns",
    response_model=list[CampaignDTO],
    summary="List campaigns",
)
async def campaigns(
    request: CampaignsRequestDTO,
    service: AdsService = Depends(get_ads_service),
) -> list[CampaignDTO]:
    items = await service.get_campaigns(request.account.to_domain())
    return [CampaignDTO.from_domain(item) for item in items]


@router.post(
    "/consolidated",
    response_model=ConsolidatedMetricsDTO,
    summary="Consolidated metrics across accounts",
)
async def consolidated(
    request: ConsolidatedRequestDTO,
    service: AdsService = Depends(get_ads_service),
) -> ConsolidatedMetricsDTO:
    summary = await service.get_consolidated_metrics(
        [account.to_domain() for account in request.accounts],
        request.date_range or DEFAULT_DATE_RANGE,
    )
    return ConsolidatedMetricsDTO.from_domain(summary)
