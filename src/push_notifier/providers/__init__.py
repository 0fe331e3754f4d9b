"""Provider registry for platform-based delivery dispatch."""

from push_notifier.enums import SUPPORTED_PLATFORMS, Platform
from push_notifier.exceptions import InvalidPlatformError
from push_notifier.providers.apns import ApnsProvider
from push_notifier.providers.base import DeliveryProvider, DeliveryResult
from push_notifier.providers.fcm import FcmProvider

__all__ = [
    "ApnsProvider",
    "DeliveryProvider",
    "DeliveryResult",
    "FcmProvider",
    "ProviderRegistry",
    "create_default_registry",
]


class ProviderRegistry:
    """Maps each supported platform to the provider that delivers to it.

    At most one provider per platform; registering again replaces it.
    """

    def __init__(self) -> None:
        self._providers: dict[Platform, DeliveryProvider] = {}

    def register(self, platform: str, provider: DeliveryProvider) -> None:
        """Register *provider* for *platform* (case-insensitive).

        Raises InvalidPlatformError for anything other than ios or android.
        """
        normalized = platform.lower()
        if normalized not in SUPPORTED_PLATFORMS:
            raise InvalidPlatformError(f"Platform {platform} is not supported.")
        self._providers[Platform(normalized)] = provider

    def platforms(self) -> list[Platform]:
        return list(self._providers)

    def get(self, platform: str) -> DeliveryProvider:
        """Return the provider for a platform.

        Raises KeyError if no provider is registered for the platform.
        """
        return self._providers[platform]


def create_default_registry(
    apns_certificate: str = "",
    apns_team_id: str = "",
    apns_key_id: str = "",
    fcm_certificate: str = "",
) -> ProviderRegistry:
    """Create a registry with the built-in stub providers."""
    registry = ProviderRegistry()
    registry.register(
        Platform.IOS,
        ApnsProvider(certificate=apns_certificate, team_id=apns_team_id, key_id=apns_key_id),
    )
    registry.register(Platform.ANDROID, FcmProvider(certificate=fcm_certificate))
    return registry
