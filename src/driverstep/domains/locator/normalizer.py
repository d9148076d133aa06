"""Locator normalization.

Rebuilds the ``By.<strategy>("<value>")`` expression a test author would
write from the text a driver prints for an element handle or a locator.
This is a best-effort cosmetic transform: anything that does not match the
expected shape is returned unchanged.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional, Pattern

logger = logging.getLogger(__name__)


class LocatorNormalizer:
    """Turns driver-native element/locator text into ``By.*`` expressions.

    The patterns are class attributes; subclass and override them when a
    driver prints a different format.
    """

    # "[[RemoteWebDriver: firefox on WINDOWS (a66f...)] -> xpath: .//*[@id='x']/a]"
    ELEMENT_PATTERN: Pattern[str] = re.compile(r"(\[\[.+\] -> )(.+)\]")
    # "xpath: .//*[@id='x']/a"
    LOCATOR_PATTERN: Pattern[str] = re.compile(r"(\S+): (.+)")
    # "link text: Click Here"
    LINK_TEXT_PATTERN: Pattern[str] = re.compile(r"(link text): (.+)")
    # "By.xpath: .//*[@id='thePage:j_id39']/img"
    BY_PATTERN: Pattern[str] = re.compile(r"By\.(\S+): (.+)")

    LINK_TEXT_STRATEGY = "linkText"

    def normalize_element_locator(self, element: Any) -> Optional[str]:
        """Extract the locator from an element handle's text.

        Args:
            element: Element handle or its string form

        Returns:
            ``By.<strategy>("<value>")``, the locator description when only
            the outer shape matched, the input text when nothing matched, or
            None for None
        """
        if element is None:
            return None
        text = element if isinstance(element, str) else str(element)

        outer = self.ELEMENT_PATTERN.fullmatch(text)
        if outer is None:
            return text

        locator = outer.group(2)
        inner = self.LOCATOR_PATTERN.fullmatch(locator)
        if inner is not None:
            return self._compose(inner.group(1), inner.group(2))

        inner = self.LINK_TEXT_PATTERN.fullmatch(locator)
        if inner is not None:
            return self._compose(self.LINK_TEXT_STRATEGY, inner.group(2))

        logger.debug(f"Unrecognized locator description: {locator!r}")
        return locator

    def normalize_by_locator(self, by: Any) -> Optional[str]:
        """Convert a locator's text (``By.id: foo``) to ``By.id("foo")``."""
        if by is None:
            return None
        text = by if isinstance(by, str) else str(by)

        match = self.BY_PATTERN.fullmatch(text)
        if match is None:
            return text
        return self._compose(match.group(1), match.group(2))

    @staticmethod
    def _compose(strategy: str, value: str) -> str:
        return f'By.{strategy}("{value}")'


_default_normalizer = LocatorNormalizer()


def normalize_element_locator(element: Any) -> Optional[str]:
    """Module-level shortcut for ``LocatorNormalizer.normalize_element_locator``."""
    return _default_normalizer.normalize_element_locator(element)


def normalize_by_locator(by: Any) -> Optional[str]:
    """Module-level shortcut for ``LocatorNormalizer.normalize_by_locator``."""
    return _default_normalizer.normalize_by_locator(by)
