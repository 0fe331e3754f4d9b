"""Build and dispatch push notifications to APNS and FCM devices."""

from push_notifier.config import LoggingConfig, PushNotifierConfig
from push_notifier.devices import Device, Devices
from push_notifier.enums import Platform
from push_notifier.exceptions import (
    DevicesNotSetError,
    InvalidCertificateError,
    InvalidPlatformError,
    PushNotificationNotSetError,
    PushNotifierError,
)
from push_notifier.notification import PushNotification
from push_notifier.providers.base import DeliveryResult
from push_notifier.server import Server

__all__ = [
    "Device",
    "Devices",
    "DeliveryResult",
    "DevicesNotSetError",
    "InvalidCertificateError",
    "InvalidPlatformError",
    "LoggingConfig",
    "Platform",
    "PushNotification",
    "PushNotificationNotSetError",
    "PushNotifierConfig",
    "PushNotifierError",
    "Server",
]
