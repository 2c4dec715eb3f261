
class CrockfordError(ValueError):
    """Base class for everything this package raises on bad arguments."""


class InvalidOption(CrockfordError):
    """An option name outside the accepted set, or an unusable option value."""


class MalformedInput(CrockfordError):
    """The symbol string contains characters outside the alphabet, or its
    checksum symbol does not match."""
