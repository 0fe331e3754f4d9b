"""FCM delivery provider (stub)."""

import logging

from push_notifier.devices import Device
from push_notifier.enums import Platform
from push_notifier.notification import PushNotification
from push_notifier.providers.base import DeliveryProvider, DeliveryResult

logger = logging.getLogger(__name__)


class FcmProvider(DeliveryProvider):
    """Stub FCM provider that logs instead of sending."""

    def __init__(self, certificate: str = "") -> None:
        self.certificate = certificate

    def send(self, device: Device, notification: PushNotification) -> DeliveryResult:
        content = notification.get_content()
        preview = content[:50] if content else "(empty)"
        logger.info(
            "FCM push sent (stub)",
            extra={
                "device_key": device.get_device_key(),
                "body_preview": preview,
            },
        )
        return DeliveryResult(
            device_key=device.get_device_key(),
            platform=Platform.ANDROID,
            success=True,
            details=f"FCM delivered: {preview}",
        )
