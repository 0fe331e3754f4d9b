"""APNS delivery provider (stub)."""

import logging

from push_notifier.devices import Device
from push_notifier.enums import Platform
from push_notifier.notification import PushNotification
from push_notifier.providers.base import DeliveryProvider, DeliveryResult

logger = logging.getLogger(__name__)


class ApnsProvider(DeliveryProvider):
    """Stub APNS provider that logs instead of sending.

    Holds the token-auth credentials an HTTP/2 APNS client needs; replace
    the send() body with the client call.
    """

    def __init__(self, certificate: str = "", team_id: str = "", key_id: str = "") -> None:
        self.certificate = certificate
        self.team_id = team_id
        self.key_id = key_id

    def send(self, device: Device, notification: PushNotification) -> DeliveryResult:
        title = notification.get_title() or "(no title)"
        logger.info(
            "APNS push sent (stub)",
            extra={
                "device_key": device.get_device_key(),
                "team_id": self.team_id,
                "key_id": self.key_id,
                "title": title,
            },
        )
        return DeliveryResult(
            device_key=device.get_device_key(),
            platform=Platform.IOS,
            success=True,
            details=f"APNS delivered: {title}",
        )
