"""
Exception types raised by the scraper.

Browser errors (launch, navigation, timeout, evaluation) are not wrapped:
the orchestrator reports their message as-is.
"""


class ShopScraperError(Exception):
    """Base class for scraper errors."""


class UnknownProfileError(ShopScraperError, KeyError):
    """Raised when a profile name is not in the registry."""

    def __str__(self):
        # KeyError repr-quotes its message
        return str(self.args[0]) if self.args else ''
