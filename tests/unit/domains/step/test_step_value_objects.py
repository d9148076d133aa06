"""Tests for step value objects."""

import pytest

from driverstep.domains.step.value_objects import (
    Cmd,
    StepType,
    UNKNOWN_COMMAND,
    command_display_name,
    format_nano_time,
)


# ---------------------------------------------------------------------------
# StepType
# ---------------------------------------------------------------------------


class TestStepType:
    def test_values(self):
        assert [t.value for t in StepType] == [
            "BeforeAction", "AfterAction", "BeforeGather", "AfterGather", "Failure",
        ]

    def test_str_is_value(self):
        assert str(StepType.BEFORE_GATHER) == "BeforeGather"

    @pytest.mark.parametrize("raw,expected", [
        ("BeforeAction", StepType.BEFORE_ACTION),
        ("beforeaction", StepType.BEFORE_ACTION),
        ("AFTER_GATHER", StepType.AFTER_GATHER),
        ("after-action", StepType.AFTER_ACTION),
        ("Failure", StepType.FAILURE),
        ("Exception", StepType.FAILURE),
        (StepType.BEFORE_GATHER, StepType.BEFORE_GATHER),
    ])
    def test_parse(self, raw, expected):
        assert StepType.parse(raw) is expected

    def test_parse_none_raises(self):
        with pytest.raises(ValueError, match="step_type is required"):
            StepType.parse(None)

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown step type"):
            StepType.parse("Sideways")

    def test_before_after_flags(self):
        assert StepType.BEFORE_ACTION.is_before
        assert StepType.AFTER_GATHER.is_after
        assert not StepType.FAILURE.is_before
        assert not StepType.FAILURE.is_after


# ---------------------------------------------------------------------------
# Cmd
# ---------------------------------------------------------------------------


class TestCmd:
    def test_click_display_name(self):
        assert Cmd.CLICK.display_name == "webElement.click"
        assert str(Cmd.CLICK) == "webElement.click"

    def test_navigation_display_names(self):
        assert Cmd.TO.display_name == "webDriver.navigate().to"
        assert Cmd.BACK.display_name == "webDriver.navigate().back"

    def test_window_display_name(self):
        assert Cmd.SET_SIZE.display_name == "webDriver.manage().window().setSize"

    def test_frame_variants_share_display_name(self):
        names = {c.display_name for c in (Cmd.FRAME_BY_INDEX, Cmd.FRAME_BY_NAME, Cmd.FRAME_BY_ELEMENT)}
        assert names == {"webDriver.switchTo().frame"}

    def test_find_element_overloads_differ_by_receiver(self):
        assert Cmd.FIND_ELEMENT_BY_WEB_DRIVER.display_name == "webDriver.findElement"
        assert Cmd.FIND_ELEMENT_BY_ELEMENT.display_name == "webElement.findElement"

    def test_test_failure_renders_unknown(self):
        assert Cmd.TEST_FAILURE.display_name == UNKNOWN_COMMAND

    def test_every_other_member_has_dotted_name(self):
        for cmd in Cmd:
            if cmd is Cmd.TEST_FAILURE:
                continue
            assert cmd.display_name.startswith(("webDriver.", "webElement."))

    @pytest.mark.parametrize("raw,expected", [
        ("click", Cmd.CLICK),
        ("CLICK", Cmd.CLICK),
        ("findElementByWebDriver", Cmd.FIND_ELEMENT_BY_WEB_DRIVER),
        ("FIND_ELEMENT_BY_WEB_DRIVER", Cmd.FIND_ELEMENT_BY_WEB_DRIVER),
        (Cmd.GET, Cmd.GET),
    ])
    def test_parse(self, raw, expected):
        assert Cmd.parse(raw) is expected

    def test_parse_unknown_returns_none(self):
        assert Cmd.parse("dragAndDrop") is None
        assert Cmd.parse(None) is None


class TestCommandDisplayName:
    def test_known(self):
        assert command_display_name(Cmd.SUBMIT) == "webElement.submit"

    def test_raw_string_is_unknown(self):
        assert command_display_name("dragAndDrop") == "unknown"

    def test_none_is_unknown(self):
        assert command_display_name(None) == "unknown"


# ---------------------------------------------------------------------------
# format_nano_time
# ---------------------------------------------------------------------------


class TestFormatNanoTime:
    def test_zero(self):
        assert format_nano_time(0) == "0 sec 0 ms"

    def test_sub_millisecond(self):
        assert format_nano_time(999_999) == "0 sec 0 ms"

    def test_millis_only(self):
        assert format_nano_time(250_000_000) == "0 sec 250 ms"

    def test_seconds_and_remainder(self):
        assert format_nano_time(2_345_678_901) == "2 sec 345 ms"

    def test_exact_seconds(self):
        assert format_nano_time(3_000_000_000) == "3 sec 0 ms"

    def test_large_value_keeps_precision(self):
        assert format_nano_time(86_400_123_000_000) == "86400 sec 123 ms"
