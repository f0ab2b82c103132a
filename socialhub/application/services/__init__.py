from .ads_service import AdsService, consolidate
from .attribution_service import TrafficAttributionService
from .dispatch import BackgroundTasks, call_with_timeout
from .publishing_service import ExtendedPublishingService, PublishingService, UnifiedPublisher

__all__ = [
    "AdsService",
    "BackgroundTasks",
    "ExtendedPublishingService",
    "PublishingService",
    "TrafficAttributionService",
    "UnifiedPublisher",
    "call_with_timeout",
    "consolidate",
]
