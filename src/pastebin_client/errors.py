"""Errors raised when a paste could not be created."""

from enum import Enum


class ErrorKind(Enum):
    """The reason a paste could not be created."""

    INVALID_KEY = "invalid_key"
    BLOCKED_IP = "blocked_ip"
    EMPTY_PASTE_CONTENT = "empty_paste_content"
    PASTE_TOO_BIG = "paste_too_big"
    INVALID_PASTE_FORMAT = "invalid_paste_format"
    UNKNOWN = "unknown"


class PastebinError(Exception):
    """Base class for every failure of a paste upload."""

    kind: ErrorKind = ErrorKind.UNKNOWN
    default_message = "The paste could not be created."

    def __init__(self, message: str | None = None):
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PastebinError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class InvalidKeyError(PastebinError):
    """Raised when the service rejects the developer key."""

    kind = ErrorKind.INVALID_KEY
    default_message = "invalid api_dev_key"


class BlockedIPError(PastebinError):
    """Raised when the service refuses requests from this IP address."""

    kind = ErrorKind.BLOCKED_IP
    default_message = "IP blocked"


class EmptyPasteContentError(PastebinError):
    """Raised before sending anything when the paste content is empty."""

    kind = ErrorKind.EMPTY_PASTE_CONTENT
    default_message = "The paste content is empty."


class PasteTooBigError(PastebinError):
    """
    Raised before sending anything when the paste content exceeds the size limit.

    Attributes:
        `size` -- size of the rejected content, in bytes
        `limit` -- largest accepted size, in bytes
    """

    kind = ErrorKind.PASTE_TOO_BIG

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"The paste content is {size} bytes, the limit is {limit} bytes.")


class InvalidPasteFormatError(PastebinError):
    """Raised when the service does not know the requested syntax format."""

    kind = ErrorKind.INVALID_PASTE_FORMAT
    default_message = "invalid api_paste_format"


class UnknownError(PastebinError):
    """Raised for any response the client does not recognise. The message is the response text, verbatim."""

    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str):
        # No default message, the text that was not recognised is always kept
        super().__init__(message)


class TransportError(UnknownError):
    """Raised when the HTTP request itself could not complete."""
