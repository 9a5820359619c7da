"""A paste with all of its attributes, uploaded on demand."""

from typing import Self

from pastebin_client.api import PastebinApi
from pastebin_client.attributes import ExpirationDate, VisibilityLevel


class PastebinBuilder:
    """Holds everything needed to create a paste, so that it can be created later with `execute`."""

    def __init__(  # noqa: PLR0913,PLR0917
        self: Self,
        api_key: str,
        text: str,
        paste_name: str | None = None,
        visibility: VisibilityLevel | None = None,
        paste_format: str | None = None,
        expire_date: ExpirationDate | None = None,
    ) -> None:
        self.api = PastebinApi(api_key)
        self.text = text
        self.paste_name = paste_name
        self.visibility = visibility
        self.paste_format = paste_format
        self.expire_date = expire_date

    async def execute_async(self: Self) -> str:
        """Create the paste and return its URL."""
        return await self.api.upload_async(
            self.paste_name,
            self.visibility,
            self.text,
            self.paste_format,
            self.expire_date,
        )

    def execute(self: Self) -> str:
        """Create the paste and return its URL, blocking until done."""
        return self.api.upload(
            self.paste_name,
            self.visibility,
            self.text,
            self.paste_format,
            self.expire_date,
        )
