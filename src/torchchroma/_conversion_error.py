"""Exceptions raised by the conversion graph."""


class ConversionError(Exception):
    """No chain of registered conversions joins two color spaces."""

    pass
