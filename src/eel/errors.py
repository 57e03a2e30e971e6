"""Exceptions raised by the editor."""


class EelError(Exception):
    """Base class for editor errors."""


class ConfigurationError(EelError):
    """The host could not provide what the editor needs to start, e.g. its mount target."""


class RangeViolation(EelError, IndexError):
    """A block index was outside the list."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Block index {index} out of range (0..{length - 1})")
        self.index = index
        self.length = length
