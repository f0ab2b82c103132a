from typing import Any

from fastapi import APIRouter, Depends

from ....application.dtos import PostResultDTO, PublishRequestDTO, SocialMetricsRequestDTO
from ....application.services import UnifiedPublisher
from ..dependencies import get_publisher

router = APIRouter(tags=["publishing"])


@router.post(
    "/posts/publish",
    response_model=list[PostResultDTO],
    summary="Publish to many accounts",
    description=(
        "Publish one piece of content to every active account. Always answers 200; "
        "per-account success or failure is reported in the result list."
    ),
)
async def publish(
    request: PublishRequestDTO,
    publisher: UnifiedPublisher = Depends(get_publisher),
) -> list[PostResultDTO]:
    results = await publisher.publish(
        [account.to_domain() for account in request.accounts],
        request.content.to_domain(),
    )
    return [PostResultDTO.from_domain(result) for result in results]


@router.post(
    "/social/metrics",
    summary="Raw social account metrics",
    description="Vendor-shaped metrics for one social account, or null when unavailable.",
)
async def social_metrics(
    request: SocialMetricsRequestDTO,
    publisher: UnifiedPublisher = Depends(get_publisher),
) -> dict[str, Any] | None:
    return await publisher.get_account_metrics(request.account.to_domain())
