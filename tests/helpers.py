"""Helpers shared by push_notifier tests."""

from push_notifier.devices import Device


def make_device(operating_system: str = "iOS", device_key: str = "test-ios-device-key") -> Device:
    return Device().set_operating_system(operating_system).set_device_key(device_key)
