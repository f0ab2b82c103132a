from ...application.services import (
    AdsService,
    ExtendedPublishingService,
    PublishingService,
    TrafficAttributionService,
    UnifiedPublisher,
)
from ...config import settings
from ...domain.ports import AttributionSink
from ...infrastructure.adapters import (
    GatewayFactory,
    InMemoryAttributionSink,
    MeasurementProtocolSink,
)

# Singleton service instances
_attribution: TrafficAttributionService | None = None
_publisher: UnifiedPublisher | None = None
_ads: AdsService | None = None


def _create_sink() -> AttributionSink:
    if settings.ga4_enabled:
        return MeasurementProtocolSink(
            measurement_id=settings.ga4_measurement_id,
            api_secret=settings.ga4_api_secret,
            timeout=settings.http_timeout_seconds,
        )
    return InMemoryAttributionSink()


def get_attribution_service() -> TrafficAttributionService:
    global _attribution
    if _attribution is None:
        _attribution = TrafficAttributionService(_create_sink())
    return _attribution


def get_publisher() -> UnifiedPublisher:
    global _publisher
    if _publisher is None:
        factory = GatewayFactory(settings)
        core = PublishingService(
            factory.core_registry(),
            dispatch_timeout=settings.dispatch_timeout_seconds,
        )
        extended = ExtendedPublishingService(
            factory.additional_registry(),
            attribution=get_attribution_service(),
            website_url=settings.attribution_website_url,
            dispatch_timeout=settings.dispatch_timeout_seconds,
        )
        _publisher = UnifiedPublisher(core, extended)
    return _publisher


def get_ads_service() -> AdsService:
    global _ads
    if _ads is None:
        _ads = AdsService(
            GatewayFactory(settings).ads_registry(),
            dispatch_timeout=settings.dispatch_timeout_seconds,
        )
    return _ads
