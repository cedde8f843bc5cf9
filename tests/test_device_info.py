import json

import pytest

from webappmgr.device_info import DeviceInfo, parse_platform_version


@pytest.mark.parametrize(
    "version, expected",
    [
        ("00.00.00", (0, 0, 0)),
        ("1.2.3", (1, 2, 3)),
        ("4", (-1, -1, -1)),
        ("12.345", (-1, -1, -1)),
        ("a.b.c", (0, 0, 0)),
    ],
)
def test_parse_platform_version(version, expected):
    assert parse_platform_version(version) == expected


def test_parse_platform_version_multi_digit_parts():
    assert parse_platform_version("10.23.45") == (10, 23, 45)


def test_defaults():
    info = DeviceInfo()
    assert info.model_name == "webOS.Open"
    assert info.platform_version == "00.00.00"
    assert info.get_device_info("ModelName") is None


def test_set_and_get_device_info_round_trip():
    info = DeviceInfo()
    info.set_device_info("LocalCountry", "USA")
    assert info.get_device_info("LocalCountry") == "USA"


def _write(tmp_path, content):
    path = tmp_path / "localeInfo"
    path.write_text(content)
    return str(path)


def test_initialize_valid_file(tmp_path):
    doc = {
        "localeInfo": {"locales": {"UI": "en-US"}},
        "country": "USA",
        "smartServiceCountryCode3": "GBR",
    }
    info = DeviceInfo()
    assert info.initialize(_write(tmp_path, json.dumps(doc))) is True
    assert info.system_language == "en-US"
    assert info.get_device_info("LocalCountry") == "USA"
    assert info.get_device_info("SmartServiceCountry") == "GBR"


def test_initialize_rejects_missing_country(tmp_path, capsys):
    doc = {"localeInfo": {"locales": {"UI": "en-US"}}, "smartServiceCountryCode3": "GBR"}
    info = DeviceInfo()
    assert info.initialize(_write(tmp_path, json.dumps(doc))) is False
    assert info.system_language == ""
    assert "LOCALEINFO_FILE_READ_FAIL" in capsys.readouterr().err


def test_initialize_rejects_malformed_json(tmp_path):
    info = DeviceInfo()
    assert info.initialize(_write(tmp_path, "{not json")) is False
    assert info.get_device_info("LocalCountry") is None


def test_initialize_missing_file(tmp_path):
    info = DeviceInfo()
    assert info.initialize(str(tmp_path / "absent")) is False
    assert info.system_language == ""


def test_display_info_from_hardware_values():
    info = DeviceInfo(display_width=10, display_height=20)
    info.set_device_info("HardwareScreenWidth", "1920")
    info.set_device_info("HardwareScreenHeight", "1080")
    info.init_display_info()
    assert (info.screen_width, info.screen_height) == (1920, 1080)


def test_display_info_falls_back_to_display_size():
    info = DeviceInfo(display_width=1280, display_height=720)
    info.set_device_info("HardwareScreenWidth", "1920")
    info.init_display_info()
    assert (info.screen_width, info.screen_height) == (1280, 720)


def test_gather_info_reads_platform():
    info = DeviceInfo()
    info.set_device_info("ModelName", "WEBOS1")
    info.set_device_info("FirmwareVersion", "3.5.1")
    info.gather_info()
    assert info.model_name == "WEBOS1"
    assert info.platform_version == "3.5.1"
    assert (info.version_major, info.version_minor, info.version_dot) == (3, 5, 1)


def test_gather_info_bad_version():
    info = DeviceInfo()
    info.set_device_info("FirmwareVersion", "3")
    info.gather_info()
    assert (info.version_major, info.version_minor, info.version_dot) == (-1, -1, -1)