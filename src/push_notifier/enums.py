from enum import StrEnum


class Platform(StrEnum):
    IOS = "ios"
    ANDROID = "android"


SUPPORTED_PLATFORMS: frozenset[str] = frozenset(p.value for p in Platform)
