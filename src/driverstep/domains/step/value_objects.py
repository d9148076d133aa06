"""Step Domain Value Objects.

Closed enumerations describing which observation point a record captures
and which driver command was instrumented, plus duration formatting.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
UNKNOWN_COMMAND = "unknown"


class StepType(Enum):
    """Observation point of one instrumented operation."""

    BEFORE_ACTION = "BeforeAction"
    AFTER_ACTION = "AfterAction"
    BEFORE_GATHER = "BeforeGather"
    AFTER_GATHER = "AfterGather"
    FAILURE = "Failure"

    @classmethod
    def parse(cls, value: Any) -> "StepType":
        """Resolve a StepType from a member, value or member name.

        Matching is case-insensitive and ignores ``_``/``-`` separators.
        The legacy name ``Exception`` resolves to FAILURE.

        Raises:
            ValueError: If value is None or not a known step type.
        """
        if value is None:
            raise ValueError("step_type is required")
        if isinstance(value, cls):
            return value
        key = _fold(str(value))
        if key == "exception":
            return cls.FAILURE
        for member in cls:
            if key in (_fold(member.value), _fold(member.name)):
                return member
        raise ValueError(f"Unknown step type: {value!r}")

    @property
    def is_before(self) -> bool:
        return self in (StepType.BEFORE_ACTION, StepType.BEFORE_GATHER)

    @property
    def is_after(self) -> bool:
        return self in (StepType.AFTER_ACTION, StepType.AFTER_GATHER)

    def __str__(self) -> str:
        return self.value


class Cmd(Enum):
    """Instrumented driver commands.

    Values are the command identifiers used in exported records. Several
    members share a display name because they only differ in which
    overload was called (see ``display_name``).
    """

    # WebDriver
    CLOSE = "close"
    FIND_ELEMENT_BY_WEB_DRIVER = "findElementByWebDriver"
    FIND_ELEMENTS_BY_WEB_DRIVER = "findElementsByWebDriver"
    GET = "get"
    GET_CURRENT_URL = "getCurrentUrl"
    GET_TITLE = "getTitle"
    GET_WINDOW_HANDLE = "getWindowHandle"
    GET_WINDOW_HANDLES = "getWindowHandles"
    QUIT = "quit"
    # WebDriver.Navigation
    BACK = "back"
    FORWARD = "forward"
    REFRESH = "refresh"
    TO = "to"
    # WebDriver.TargetLocator
    ACTIVE_ELEMENT = "activeElement"
    ALERT = "alert"
    DEFAULT_CONTENT = "defaultContent"
    FRAME_BY_INDEX = "frameByIndex"
    FRAME_BY_NAME = "frameByName"
    FRAME_BY_ELEMENT = "frameByElement"
    PARENT_FRAME = "parentFrame"
    WINDOW = "window"
    # WebDriver.Window
    FULLSCREEN = "fullscreen"
    GET_POSITION = "getPosition"
    GET_SIZE = "getSize"
    MAXIMIZE = "maximize"
    SET_POSITION = "setPosition"
    SET_SIZE = "setSize"
    # WebElement
    CLICK = "click"
    CLEAR = "clear"
    FIND_ELEMENT_BY_ELEMENT = "findElementByElement"
    FIND_ELEMENTS_BY_ELEMENT = "findElementsByElement"
    GET_ATTRIBUTE = "getAttribute"
    GET_CSS_VALUE = "getCssValue"
    GET_TAG_NAME = "getTagName"
    GET_TEXT = "getText"
    IS_DISPLAYED = "isDisplayed"
    IS_ENABLED = "isEnabled"
    IS_SELECTED = "isSelected"
    SEND_KEYS = "sendKeys"
    SUBMIT = "submit"
    # the current command has failed
    TEST_FAILURE = "testFailure"

    @property
    def display_name(self) -> str:
        """Dotted call path a test author would write for this command."""
        return _DISPLAY_NAMES.get(self, UNKNOWN_COMMAND)

    @classmethod
    def parse(cls, value: Any) -> Optional["Cmd"]:
        """Resolve a command from a member, value or member name.

        Returns None instead of raising when the value is not recognized.
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        key = _fold(str(value))
        for member in cls:
            if key in (_fold(member.value), _fold(member.name)):
                return member
        return None

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES: Dict[Cmd, str] = {
    Cmd.CLOSE: "webDriver.close",
    Cmd.FIND_ELEMENT_BY_WEB_DRIVER: "webDriver.findElement",
    Cmd.FIND_ELEMENTS_BY_WEB_DRIVER: "webDriver.findElements",
    Cmd.GET: "webDriver.get",
    Cmd.GET_CURRENT_URL: "webDriver.getCurrentUrl",
    Cmd.GET_TITLE: "webDriver.getTitle",
    Cmd.GET_WINDOW_HANDLE: "webDriver.getWindowHandle",
    Cmd.GET_WINDOW_HANDLES: "webDriver.getWindowHandles",
    Cmd.QUIT: "webDriver.quit",
    Cmd.BACK: "webDriver.navigate().back",
    Cmd.FORWARD: "webDriver.navigate().forward",
    Cmd.REFRESH: "webDriver.navigate().refresh",
    Cmd.TO: "webDriver.navigate().to",
    Cmd.ACTIVE_ELEMENT: "webDriver.switchTo().activeElement",
    Cmd.ALERT: "webDriver.switchTo().alert",
    Cmd.DEFAULT_CONTENT: "webDriver.switchTo().defaultContent",
    Cmd.FRAME_BY_INDEX: "webDriver.switchTo().frame",
    Cmd.FRAME_BY_NAME: "webDriver.switchTo().frame",
    Cmd.FRAME_BY_ELEMENT: "webDriver.switchTo().frame",
    Cmd.PARENT_FRAME: "webDriver.switchTo().parentFrame",
    Cmd.WINDOW: "webDriver.switchTo().window",
    Cmd.FULLSCREEN: "webDriver.manage().window().fullscreen",
    Cmd.GET_POSITION: "webDriver.manage().window().getPosition",
    Cmd.GET_SIZE: "webDriver.manage().window().getSize",
    Cmd.MAXIMIZE: "webDriver.manage().window().maximize",
    Cmd.SET_POSITION: "webDriver.manage().window().setPosition",
    Cmd.SET_SIZE: "webDriver.manage().window().setSize",
    Cmd.CLICK: "webElement.click",
    Cmd.CLEAR: "webElement.clear",
    Cmd.FIND_ELEMENT_BY_ELEMENT: "webElement.findElement",
    Cmd.FIND_ELEMENTS_BY_ELEMENT: "webElement.findElements",
    Cmd.GET_ATTRIBUTE: "webElement.getAttribute",
    Cmd.GET_CSS_VALUE: "webElement.getCssValue",
    Cmd.GET_TAG_NAME: "webElement.getTagName",
    Cmd.GET_TEXT: "webElement.getText",
    Cmd.IS_DISPLAYED: "webElement.isDisplayed",
    Cmd.IS_ENABLED: "webElement.isEnabled",
    Cmd.IS_SELECTED: "webElement.isSelected",
    Cmd.SEND_KEYS: "webElement.sendKeys",
    Cmd.SUBMIT: "webElement.submit",
}


def command_display_name(cmd: Any) -> str:
    """Display name for any command value; "unknown" when unrecognized."""
    if isinstance(cmd, Cmd):
        return cmd.display_name
    return UNKNOWN_COMMAND


def format_nano_time(duration: int) -> str:
    """Render a nanosecond duration as ``"<sec> sec <ms> ms"``.

    Examples:
        >>> format_nano_time(2_345_678_901)
        '2 sec 345 ms'
    """
    # truncate toward zero on both units
    sign = -1 if duration < 0 else 1
    seconds = sign * (abs(duration) // NANOS_PER_SECOND)
    millis = sign * (abs(duration) // NANOS_PER_MILLI) - seconds * 1000
    return f"{seconds} sec {millis} ms"


def _fold(text: str) -> str:
    return text.strip().replace("_", "").replace("-", "").lower()
