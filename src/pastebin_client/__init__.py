"""A client for creating pastes through the Pastebin API."""

from pastebin_client import log
from pastebin_client.api import PastebinApi, classify_response
from pastebin_client.attributes import ExpirationDate, VisibilityLevel
from pastebin_client.builder import PastebinBuilder
from pastebin_client.errors import (
    BlockedIPError,
    EmptyPasteContentError,
    ErrorKind,
    InvalidKeyError,
    InvalidPasteFormatError,
    PastebinError,
    PasteTooBigError,
    TransportError,
    UnknownError,
)
from pastebin_client.request import PasteRequest, build_paste_request

__all__ = [
    "BlockedIPError",
    "EmptyPasteContentError",
    "ErrorKind",
    "ExpirationDate",
    "InvalidKeyError",
    "InvalidPasteFormatError",
    "PasteRequest",
    "PasteTooBigError",
    "PastebinApi",
    "PastebinBuilder",
    "PastebinError",
    "TransportError",
    "UnknownError",
    "VisibilityLevel",
    "build_paste_request",
    "classify_response",
    "log",
]
