"""Errors raised when a push notification is misconfigured."""


class PushNotifierError(Exception):
    """Base class for all push_notifier errors."""


class InvalidPlatformError(PushNotifierError):
    pass


class InvalidCertificateError(PushNotifierError):
    pass


class DevicesNotSetError(PushNotifierError):
    pass


class PushNotificationNotSetError(PushNotifierError):
    pass
