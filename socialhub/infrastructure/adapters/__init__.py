from .attribution_sinks import InMemoryAttributionSink, MeasurementProtocolSink
from .gateway_factory import (
    ADDITIONAL_PLATFORMS,
    CORE_PLATFORMS,
    AdPlatformRegistry,
    GatewayFactory,
    PlatformRegistry,
)
from .gateway_registry import GatewayRegistry

__all__ = [
    "ADDITIONAL_PLATFORMS",
    "AdPlatformRegistry",
    "CORE_PLATFORMS",
    "GatewayFactory",
    "GatewayRegistry",
    "InMemoryAttributionSink",
    "MeasurementProtocolSink",
    "PlatformRegistry",
]
