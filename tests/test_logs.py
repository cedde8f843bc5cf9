import io

import pytest

from webappmgr import logs
from webappmgr.logs import LogControl, LogLevel


@pytest.fixture(autouse=True)
def _reset_switches():
    logs.set_log_control("all", "off")
    logs.set_log_control("mouseMove", "off")
    yield
    logs.set_log_control("all", "off")
    logs.set_log_control("mouseMove", "off")


def test_all_on_sets_events_and_bundles_but_not_mouse():
    control = LogControl()
    control.set("all", "on")
    assert control.events is True
    assert control.bundle_messages is True
    assert control.mouse_move is False


def test_individual_keys():
    control = LogControl()
    control.set("event", "on")
    assert (control.events, control.bundle_messages) == (True, False)
    control.set("bundleMessage", "on")
    assert control.bundle_messages is True
    control.set("mouseMove", "on")
    assert control.mouse_move is True
    control.set("event", "off")
    assert control.events is False


def test_unknown_value_or_key_changes_nothing():
    control = LogControl(events=True)
    control.set("event", "maybe")
    control.set("unknown", "off")
    assert control == LogControl(events=True)


def test_module_level_switches():
    logs.set_log_control("event", "on")
    assert logs.debug_events_enabled() is True
    assert logs.debug_bundle_messages_enabled() is False
    logs.set_log_control("mouseMove", "on")
    assert logs.debug_mouse_move_enabled() is True
    logs.set_log_control("all", "off")
    assert logs.debug_events_enabled() is False


@pytest.mark.parametrize(
    "level, name",
    [(-1, "None"), (0, "EMERGENCY"), (3, "ERROR"), (4, "WARNING"), (7, "DEBUG")],
)
def test_level_names(level, name):
    assert logs.log_level_name(level) == name


def test_unknown_level_name_is_empty():
    assert logs.log_level_name(42) == ""


def test_format_no_fields_is_text():
    assert logs.format_fields([], "hello") == "hello"


def test_format_one_field():
    assert logs.format_fields([("A", "x")], "t") == '{A:"x"}t'


def test_format_three_fields_separated():
    result = logs.format_fields([("A", "x"), ("B", 1), ("C", "z")], "t")
    assert result.count("}, {") == 2
    assert result.endswith("} t")
    assert "{B:1}" in result


def test_format_eight_fields_uses_wide_separator():
    fields = [(f"K{i}", i) for i in range(8)]
    result = logs.format_fields(fields, "t")
    assert result.count("} , {") == 1
    assert result.count("}, {") == 6


def test_too_many_fields():
    with pytest.raises(ValueError):
        logs.format_fields([("K", 1)] * 11, "")


def test_log_msg_writes_line():
    out = io.StringIO()
    logs.log_msg("INFO", "GENERAL", [], "hello", stream=out)
    assert out.getvalue() == "[INFO] GENERAL hello\n"


def test_log_msg_accepts_level_enum_and_missing_msgid():
    out = io.StringIO()
    logs.log_msg(LogLevel.DEBUG, None, [("K", "v")], "", stream=out)
    line = out.getvalue()
    assert line.startswith("[DEBUG]  ")
    assert '"v"' in line


def test_log_string():
    out = io.StringIO()
    logs.log_string(7, "id", "kv", "msg", stream=out)
    assert out.getvalue() == "[DEBUG] id kv msg\n"