from push_notifier.enums import SUPPORTED_PLATFORMS, Platform


class TestPlatform:
    def test_values(self):
        assert Platform.IOS == "ios"
        assert Platform.ANDROID == "android"

    def test_is_string(self):
        assert isinstance(Platform.IOS, str)

    def test_members_count(self):
        assert len(Platform) == 2

    def test_supported_platforms(self):
        assert SUPPORTED_PLATFORMS == {"ios", "android"}
