"""Push recipients: a single device and an ordered device collection."""

from collections.abc import Iterable, Iterator

from push_notifier.enums import SUPPORTED_PLATFORMS, Platform
from push_notifier.exceptions import InvalidPlatformError


class Device:
    """One recipient, identified by platform and device key."""

    def __init__(
        self,
        operating_system: str | None = None,
        device_key: str | None = None,
    ) -> None:
        self._operating_system: Platform | None = None
        self._device_key: str | None = None

        if operating_system is not None:
            self.set_operating_system(operating_system)
        if device_key is not None:
            self.set_device_key(device_key)

    def set_operating_system(self, operating_system: str) -> "Device":
        """Set the platform, normalized to lowercase.

        Raises InvalidPlatformError if the platform is not ios or android.
        """
        normalized = operating_system.lower()
        if normalized not in SUPPORTED_PLATFORMS:
            raise InvalidPlatformError(f"Platform {operating_system} is not supported.")

        self._operating_system = Platform(normalized)
        return self

    def get_operating_system(self) -> str | None:
        return self._operating_system

    def set_device_key(self, device_key: str) -> "Device":
        self._device_key = device_key
        return self

    def get_device_key(self) -> str | None:
        return self._device_key

    def __repr__(self) -> str:
        return f"Device(operating_system={self._operating_system!r}, device_key={self._device_key!r})"


class Devices:
    """Ordered collection of devices. Duplicates are kept."""

    def __init__(self, devices: Iterable[Device] = ()) -> None:
        self._devices: list[Device] = list(devices)

    @classmethod
    def single(cls, device: Device) -> "Devices":
        """Create a one-element collection."""
        return cls([device])

    def all(self) -> list[Device]:
        return self._devices

    def for_platform(self, platform: str) -> list[Device]:
        return [d for d in self._devices if d.get_operating_system() == platform]

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[Device]:
        return iter(self._devices)
