import enum


@enum.unique
class Platform(enum.Enum):
    MACOS = "macOS"
    WINDOWS = "windows"
    ANDROID = "android"
    IOS = "iOS"
    CHROME = "chrome"

    @enum.property
    def is_mobile(self):
        match self:
            case Platform.IOS | Platform.ANDROID:
                return True
            case _:
                return False

    @enum.property
    def variants(self) -> tuple["DeviceVariant", ...]:
        match self:
            case Platform.IOS:
                return (DeviceVariant.PRIMARY, DeviceVariant.IPAD_9IN, DeviceVariant.IPAD_12IN)
            case Platform.ANDROID:
                return (DeviceVariant.PRIMARY, DeviceVariant.TABLET_600)
            case _:
                return ()


@enum.unique
class DeviceVariant(enum.Enum):
    PRIMARY = "primary"
    IPAD_9IN = "iPad-9in"
    IPAD_12IN = "iPad-12in"
    TABLET_600 = "tablet-600"


class KbdsimError(Exception):
    pass
