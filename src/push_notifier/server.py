"""Push server configuration and the send() entry point."""

import logging
import os

from push_notifier.config import PushNotifierConfig
from push_notifier.devices import Devices
from push_notifier.exceptions import (
    DevicesNotSetError,
    InvalidCertificateError,
    PushNotificationNotSetError,
)
from push_notifier.notification import PushNotification
from push_notifier.providers import ProviderRegistry, create_default_registry
from push_notifier.providers.base import DeliveryResult

logger = logging.getLogger(__name__)


class Server:
    """Credentials, recipients and payload for one push dispatch.

    Certificate paths are checked for existence when set and are not
    re-checked before sending.
    """

    def __init__(self) -> None:
        self._apns_certificate = ""
        self._apns_team_id = ""
        self._apns_key_id = ""
        self._fcm_certificate = ""
        self._devices: Devices | None = None
        self._push_notification: PushNotification | None = None
        self._provider_registry: ProviderRegistry | None = None

    @classmethod
    def from_config(cls, config: PushNotifierConfig) -> "Server":
        """Build a server from settings, skipping unset certificate paths."""
        server = cls().set_apns_team_id(config.apns_team_id).set_apns_key_id(config.apns_key_id)
        if config.apns_certificate_path:
            server.set_apns_certificate(config.apns_certificate_path)
        if config.fcm_certificate_path:
            server.set_fcm_certificate(config.fcm_certificate_path)
        return server

    def set_devices(self, devices: Devices) -> "Server":
        self._devices = devices
        return self

    def get_devices(self) -> Devices | None:
        return self._devices

    def set_apns_certificate(self, certificate_path: str) -> "Server":
        if not os.path.exists(certificate_path):
            raise InvalidCertificateError(
                f"The APNS certificate path {certificate_path} does not exist."
            )

        self._apns_certificate = certificate_path
        return self

    def get_apns_certificate(self) -> str:
        return self._apns_certificate

    def set_apns_team_id(self, team_id: str) -> "Server":
        self._apns_team_id = team_id
        return self

    def get_apns_team_id(self) -> str:
        return self._apns_team_id

    def set_apns_key_id(self, key_id: str) -> "Server":
        self._apns_key_id = key_id
        return self

    def get_apns_key_id(self) -> str:
        return self._apns_key_id

    def set_fcm_certificate(self, certificate_path: str) -> "Server":
        if not os.path.exists(certificate_path):
            raise InvalidCertificateError(
                f"The FCM certificate path {certificate_path} does not exist."
            )

        self._fcm_certificate = certificate_path
        return self

    def get_fcm_certificate(self) -> str:
        return self._fcm_certificate

    def set_push_notification(self, push_notification: PushNotification) -> "Server":
        self._push_notification = push_notification
        return self

    def get_push_notification(self) -> PushNotification | None:
        return self._push_notification

    def set_provider_registry(self, registry: ProviderRegistry) -> "Server":
        self._provider_registry = registry
        return self

    def get_provider_registry(self) -> ProviderRegistry:
        """Return the explicit registry, or stub providers built from the credentials."""
        if self._provider_registry is not None:
            return self._provider_registry
        return create_default_registry(
            apns_certificate=self._apns_certificate,
            apns_team_id=self._apns_team_id,
            apns_key_id=self._apns_key_id,
            fcm_certificate=self._fcm_certificate,
        )

    def send(self) -> list[DeliveryResult]:
        """Deliver the notification to every device, in order.

        Raises DevicesNotSetError or PushNotificationNotSetError when the
        server is incomplete. A failing provider does not stop the
        remaining devices; its device gets a failed result instead.
        """
        if self._devices is None:
            raise DevicesNotSetError("The push server does not have any devices set.")

        if self._push_notification is None:
            raise PushNotificationNotSetError(
                "The push server does not have a push notification set."
            )

        registry = self.get_provider_registry()
        results: list[DeliveryResult] = []

        for device in self._devices:
            platform = device.get_operating_system()
            log_ctx = {"device_key": device.get_device_key(), "platform": platform}

            try:
                provider = registry.get(platform)
            except KeyError:
                logger.warning("No provider for platform, skipping", extra=log_ctx)
                results.append(
                    DeliveryResult(
                        device_key=device.get_device_key(),
                        platform=platform,
                        success=False,
                        details=f"No provider for platform {platform}",
                    )
                )
                continue

            try:
                result = provider.send(device, self._push_notification)
            except Exception as exc:
                logger.exception("Provider raised exception", extra=log_ctx)
                result = DeliveryResult(
                    device_key=device.get_device_key(),
                    platform=platform,
                    success=False,
                    details=str(exc),
                )

            if not result.success:
                logger.warning(
                    "Delivery failed", extra={**log_ctx, "details": result.details}
                )
            results.append(result)

        sent = sum(1 for r in results if r.success)
        logger.info(
            "Push dispatch finished",
            extra={"sent": sent, "failed": len(results) - sent},
        )
        return results
