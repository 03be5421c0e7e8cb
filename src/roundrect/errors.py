"""
Exception types for roundrect.

All input checking happens before any geometry is computed, so a raised
error always means nothing was built or drawn.
"""


class RoundRectError(Exception):
    """Base class for all roundrect errors."""


class InvalidInput(RoundRectError, ValueError):
    """An argument has the wrong shape, type or sign."""

    def __init__(self, argument, message):
        self.argument = argument
        super().__init__(message)


class UnsupportedOption(RoundRectError, ValueError):
    """An option value is not one of the recognised choices."""

    def __init__(self, option, message):
        self.option = option
        super().__init__(message)
