"""Device, display and platform information for the web app manager."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .logs import log_msg
from .msgid import MsgId
from .utils import read_file, str_to_int_with_default, string_to_json

DEFAULT_LOCALE_PATH = "/var/luna/preferences/localeInfo"


def parse_platform_version(version: str) -> tuple[int, int, int]:
    """Split a ``<major>.<minor>.<dot>`` version into integers.

    Parts that do not start with a number count as 0. A version with fewer
    than two dots gives (-1, -1, -1).
    """
    major_pos = version.find(".")
    if major_pos < 0:
        return -1, -1, -1
    minor_pos = version.find(".", major_pos + 1)
    if minor_pos < 0:
        return -1, -1, -1
    major = str_to_int_with_default(version[:major_pos], 0)
    # The minor part is read from a window as long as the minor position;
    # only its leading number matters.
    minor_text = version[major_pos + 1 : major_pos + 1 + minor_pos]
    minor = str_to_int_with_default(minor_text, 0)
    dot = str_to_int_with_default(version[minor_pos + 1 :], 0)
    return major, minor, dot


def _is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


class DeviceInfo:
    """Named device properties plus derived display and platform details."""

    def __init__(
        self,
        display_width: int = 0,
        display_height: int = 0,
        screen_density: float = 1.0,
    ) -> None:
        self.display_width = display_width
        self.display_height = display_height
        self.screen_density = screen_density
        self.screen_width = 0
        self.screen_height = 0
        self.model_name = "webOS.Open"
        self.platform_version = "00.00.00"
        self.version_major = 0
        self.version_minor = 0
        self.version_dot = 0
        self.ota_id = ""
        self.hardware_version = "0x00000001"
        self.firmware_version = "00.00.01"
        self.system_language = ""
        self._info: dict[str, str] = {}

    def initialize(self, locale_path: str = DEFAULT_LOCALE_PATH) -> bool:
        """Load language and country settings from a locale file.

        Returns True if the settings were applied. An invalid file is logged
        and leaves everything unchanged.
        """
        text = read_file(locale_path)
        if not text:
            return False

        try:
            locale_json: Any = string_to_json(text)
        except ValueError:
            locale_json = None

        valid = (
            _is_object(locale_json)
            and len(locale_json) > 0
            and _is_object(locale_json.get("localeInfo"))
            and _is_object(locale_json["localeInfo"].get("locales"))
            and isinstance(locale_json["localeInfo"]["locales"].get("UI"), str)
            and isinstance(locale_json.get("country"), str)
            and isinstance(locale_json.get("smartServiceCountryCode3"), str)
        )
        if not valid:
            log_msg(
                "ERROR",
                MsgId.LOCALEINFO_READ_FAIL.value,
                [("CONTENT", text)],
                "",
            )
            return False

        self.set_system_language(locale_json["localeInfo"]["locales"]["UI"])
        self.set_device_info("LocalCountry", locale_json["country"])
        self.set_device_info(
            "SmartServiceCountry", locale_json["smartServiceCountryCode3"]
        )
        return True

    def set_system_language(self, language: str) -> None:
        self.system_language = language

    def set_device_info(self, name: str, value: str) -> None:
        self._info[name] = value

    def get_device_info(self, name: str) -> Optional[str]:
        """The value stored under ``name``, or None."""
        return self._info.get(name)

    def init_display_info(self) -> None:
        """Derive the logical screen size from hardware size and density."""
        width_text = self.get_device_info("HardwareScreenWidth")
        height_text = self.get_device_info("HardwareScreenHeight")
        if width_text is not None and height_text is not None:
            width = str_to_int_with_default(width_text, 0)
            height = str_to_int_with_default(height_text, 0)
        else:
            width = self.display_width
            height = self.display_height
        self.screen_width = int(width / self.screen_density)
        self.screen_height = int(height / self.screen_density)

    def init_platform_info(self) -> None:
        """Read the model name and split the firmware version."""
        model = self.get_device_info("ModelName")
        if model is not None:
            self.model_name = model
        firmware = self.get_device_info("FirmwareVersion")
        if firmware is not None:
            self.platform_version = firmware
        (
            self.version_major,
            self.version_minor,
            self.version_dot,
        ) = parse_platform_version(self.platform_version)

    def gather_info(self) -> None:
        self.init_display_info()
        self.init_platform_info()