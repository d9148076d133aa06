"""Locator Domain - readable locators from driver-native text."""

from .normalizer import (
    LocatorNormalizer,
    normalize_by_locator,
    normalize_element_locator,
)

__all__ = [
    "LocatorNormalizer",
    "normalize_by_locator",
    "normalize_element_locator",
]
