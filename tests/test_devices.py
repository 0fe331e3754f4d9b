"""Tests for Device and the Devices collection."""

import pytest

from push_notifier.devices import Device, Devices
from push_notifier.enums import Platform
from push_notifier.exceptions import InvalidPlatformError

from tests.helpers import make_device


class TestDevice:
    def test_ios_device_can_be_created(self) -> None:
        device = Device().set_operating_system("ios").set_device_key("test-ios-device-key")

        assert device.get_operating_system() == "ios"
        assert device.get_device_key() == "test-ios-device-key"

    def test_android_device_can_be_created(self) -> None:
        device = Device().set_operating_system("android").set_device_key("test-android-device-key")

        assert device.get_operating_system() == "android"
        assert device.get_device_key() == "test-android-device-key"

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("iOS", Platform.IOS), ("IOS", Platform.IOS), ("Android", Platform.ANDROID), ("ANDROID", Platform.ANDROID)],
    )
    def test_platform_is_normalized_to_lowercase(self, name: str, expected: Platform) -> None:
        device = Device().set_operating_system(name)

        assert device.get_operating_system() == expected

    @pytest.mark.parametrize("name", ["invalid", "windows", "", "ios "])
    def test_unsupported_platform_raises(self, name: str) -> None:
        with pytest.raises(InvalidPlatformError):
            Device().set_operating_system(name)

    def test_error_message_contains_original_value(self) -> None:
        with pytest.raises(InvalidPlatformError, match="Platform BlackBerry is not supported."):
            Device().set_operating_system("BlackBerry")

    def test_failed_set_keeps_previous_platform(self) -> None:
        device = Device().set_operating_system("ios")

        with pytest.raises(InvalidPlatformError):
            device.set_operating_system("symbian")

        assert device.get_operating_system() == "ios"

    def test_constructor_validates_platform(self) -> None:
        device = Device("Android", "key-1")

        assert device.get_operating_system() == "android"
        assert device.get_device_key() == "key-1"

        with pytest.raises(InvalidPlatformError):
            Device("palm")

    def test_unset_fields_are_none(self) -> None:
        device = Device()

        assert device.get_operating_system() is None
        assert device.get_device_key() is None


class TestDevices:
    def test_can_build_collection(self) -> None:
        first = make_device()
        second = make_device("Android", "android-key")

        devices = Devices([first, second])

        assert len(devices.all()) == 2
        assert devices.all() == [first, second]

    def test_single_device_collection(self) -> None:
        device = make_device()

        devices = Devices.single(device)

        assert devices.all() == [device]

    def test_duplicates_are_kept(self) -> None:
        device = make_device()

        devices = Devices([device, device])

        assert len(devices) == 2

    def test_empty_collection(self) -> None:
        devices = Devices()

        assert devices.all() == []
        assert len(devices) == 0

    def test_accepts_any_iterable(self) -> None:
        devices = Devices(make_device(device_key=f"key-{i}") for i in range(3))

        assert [d.get_device_key() for d in devices] == ["key-0", "key-1", "key-2"]

    def test_for_platform_keeps_order(self) -> None:
        devices = Devices([
            make_device("ios", "a"),
            make_device("android", "b"),
            make_device("ios", "c"),
        ])

        assert [d.get_device_key() for d in devices.for_platform(Platform.IOS)] == ["a", "c"]
        assert [d.get_device_key() for d in devices.for_platform("android")] == ["b"]
