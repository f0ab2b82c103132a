"""
Registry mapping canonical platform keys to gateway instances.

Lookups canonicalize the account's platform string first, so aliases
(facebook/instagram, twitter/x) resolve to one registered gateway.
"""

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Generic, TypeVar

G = TypeVar("G")
K = TypeVar("K", bound=Enum)


class GatewayRegistry(Generic[K, G]):
    def __init__(
        self,
        canonicalize: Callable[[str], K | None],
        gateways: dict[K, G] | None = None,
    ) -> None:
        self._canonicalize = canonicalize
        self._gateways: dict[K, G] = dict(gateways or {})

    def resolve(self, platform: str) -> G | None:
        """Gateway for an account platform string, or None if unsupported."""
        key = self._canonicalize(platform)
        if key is None:
            return None
        return self._gateways.get(key)

    def supports(self, platform: str) -> bool:
        return self.resolve(platform) is not None

    @property
    def keys(self) -> Iterable[K]:
        return self._gateways.keys()
