"""Uploading pastes to the Pastebin API."""

import asyncio
import logging
from typing import Self

import aiohttp

from pastebin_client.attributes import ExpirationDate, VisibilityLevel
from pastebin_client.constants import API_URL, MAX_PASTE_SIZE, PASTEBIN_URL_START, Pastebin
from pastebin_client.errors import (
    BlockedIPError,
    InvalidKeyError,
    InvalidPasteFormatError,
    PastebinError,
    TransportError,
    UnknownError,
)
from pastebin_client.request import PasteRequest, build_paste_request

log = logging.getLogger(__name__)

# Error bodies are compared to these verbatim, anything else is an `UnknownError`
KNOWN_ERRORS: dict[str, type[PastebinError]] = {
    "invalid api_dev_key": InvalidKeyError,
    "IP blocked": BlockedIPError,
    "invalid api_paste_format": InvalidPasteFormatError,
}


def classify_response(body: str, *, url_start: str = PASTEBIN_URL_START) -> str:
    """
    Turn the text of an API response into the URL of the new paste.

    A body starting with `url_start` is the URL, returned as is. Any other body is an error message:
    the known ones raise their own `PastebinError`, the rest raise `UnknownError` carrying the body.
    """
    if body.startswith(url_start):
        return body

    if error := KNOWN_ERRORS.get(body):
        raise error
    raise UnknownError(body)


class PastebinApi:
    """A class wrapping the paste creation endpoint of Pastebin's API."""

    def __init__(
        self: Self,
        api_key: str,
        *,
        api_url: str = API_URL,
        url_start: str = PASTEBIN_URL_START,
        max_size: int = MAX_PASTE_SIZE,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the PastebinApi class. Without a `session`, one is opened for each upload."""
        self.api_key = api_key
        self.api_url = api_url
        self.url_start = url_start
        self.max_size = max_size
        self.session = session

    @classmethod
    def from_config(cls, *, session: aiohttp.ClientSession | None = None) -> Self:
        """Build the API wrapper from the `pastebin_*` settings."""
        return cls(
            Pastebin.api_key,
            api_url=Pastebin.api_url,
            url_start=Pastebin.base_url,
            max_size=Pastebin.max_paste_size,
            session=session,
        )

    async def _call_api(self: Self, form: dict[str, str]) -> str:
        """POST the form to the API and return the response text, whatever the status. Undecodable bytes are replaced."""
        if self.session is not None:
            async with self.session.post(self.api_url, data=form) as response:
                return await response.text(errors="replace")

        async with aiohttp.ClientSession() as session, session.post(self.api_url, data=form) as response:
            return await response.text(errors="replace")

    async def send(self: Self, request: PasteRequest) -> str:
        """Send an already built request and return the URL of the new paste."""
        try:
            body = await self._call_api(request.to_form())
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log.warning("Request to %s failed: %r", self.api_url, e)
            raise TransportError(repr(e)) from e

        try:
            url = classify_response(body, url_start=self.url_start)
        except PastebinError as e:
            log.warning("Pastebin refused the paste (%s): %s", e.kind.name, body)
            raise

        log.info("Created paste %s", url)
        return url

    async def upload_async(  # noqa: PLR0913
        self: Self,
        paste_name: str | None,
        visibility: VisibilityLevel | None,
        text: str,
        paste_format: str | None,
        expire_date: ExpirationDate | None,
    ) -> str:
        """
        Create a paste and return its URL.

        Raise `EmptyPasteContentError` or `PasteTooBigError` without sending anything if the content is invalid.
        Otherwise exactly one request is made, with no retry. A refusal raises the matching `PastebinError`
        and a failed request raises `TransportError`.
        """
        request = build_paste_request(
            self.api_key,
            text,
            paste_name=paste_name,
            visibility=visibility,
            paste_format=paste_format,
            expire_date=expire_date,
            max_size=self.max_size,
        )
        return await self.send(request)

    def upload(  # noqa: PLR0913
        self: Self,
        paste_name: str | None,
        visibility: VisibilityLevel | None,
        text: str,
        paste_format: str | None,
        expire_date: ExpirationDate | None,
    ) -> str:
        """
        Blocking version of `upload_async`, running it on a new event loop.

        Must not be called while an event loop is running in the current thread.
        """
        return asyncio.run(self.upload_async(paste_name, visibility, text, paste_format, expire_date))
