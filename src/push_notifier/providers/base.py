"""Abstract delivery provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from push_notifier.devices import Device
from push_notifier.notification import PushNotification


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Outcome of a delivery attempt to one device."""

    device_key: str | None
    platform: str | None
    success: bool
    details: str


class DeliveryProvider(ABC):
    """Base class for all platform delivery providers."""

    @abstractmethod
    def send(self, device: Device, notification: PushNotification) -> DeliveryResult:
        """Attempt to deliver a notification to one device.

        Implementations must not raise; return DeliveryResult(success=False)
        on failure instead.
        """
