"""
Exceptions raised by the input validators.
I/O failures are not wrapped: the builtin OSError subclasses propagate as-is.
"""


class InputValidationError(Exception):
    """Base exception for validation errors."""
    pass


class UnknownFileTypeError(InputValidationError):
    """Raised when no known magic-number signature matches a file."""

    def __init__(self, message: str = "File type is unknown.") -> None:
        super().__init__(message)


class WhitelistError(InputValidationError):
    """Raised when a caller-supplied top level domain whitelist is unusable."""
    pass


class EmptyWhitelistError(WhitelistError):

    def __init__(self, message: str = "The white list is empty.") -> None:
        super().__init__(message)


class InvalidWhitelistEntryError(WhitelistError):

    def __init__(self, entry: object) -> None:
        self.entry = entry
        super().__init__("Invalid top level domain in white list.")
