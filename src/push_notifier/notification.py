"""Platform-agnostic push notification payload."""


class PushNotification:
    """Title and content shown on the device.

    No validation is applied; empty values are allowed.
    """

    def __init__(self, title: str = "", content: str = "") -> None:
        self._title = title
        self._content = content

    def set_title(self, title: str) -> "PushNotification":
        self._title = title
        return self

    def get_title(self) -> str:
        return self._title

    def set_content(self, content: str) -> "PushNotification":
        self._content = content
        return self

    def get_content(self) -> str:
        return self._content
