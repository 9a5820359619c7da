"""Building the form payload of a paste request."""

import logging

from pydantic import BaseModel, ConfigDict

from pastebin_client.attributes import ExpirationDate, VisibilityLevel
from pastebin_client.constants import MAX_PASTE_SIZE
from pastebin_client.errors import EmptyPasteContentError, PasteTooBigError

log = logging.getLogger(__name__)


class PasteRequest(BaseModel):
    """Represents the form fields of a paste request."""

    model_config = ConfigDict(frozen=True)

    api_option: str = "paste"
    api_dev_key: str
    api_paste_code: str
    api_paste_private: str | None = None
    api_paste_name: str | None = None
    api_paste_expire_date: str | None = None
    api_paste_format: str | None = None

    def to_form(self) -> dict[str, str]:
        """Return the fields to form-encode. Attributes that were not given are left out."""
        return self.model_dump(exclude_none=True)


def build_paste_request(  # noqa: PLR0913
    api_key: str,
    text: str,
    paste_name: str | None = None,
    visibility: VisibilityLevel | None = None,
    paste_format: str | None = None,
    expire_date: ExpirationDate | None = None,
    *,
    max_size: int = MAX_PASTE_SIZE,
) -> PasteRequest:
    """
    Validate the paste content and build the request for it.

    The content size is measured in UTF-8 bytes. A paste bigger than `max_size` raises `PasteTooBigError`,
    an empty one raises `EmptyPasteContentError`; both are checked before any other attribute.
    Values are passed through as given, the service applies its own defaults for omitted attributes.
    """
    size = len(text.encode("utf-8"))
    if size > max_size:
        raise PasteTooBigError(size, max_size)

    if size == 0:
        raise EmptyPasteContentError

    request = PasteRequest(
        api_dev_key=api_key,
        api_paste_code=text,
        api_paste_private=visibility.encode() if visibility is not None else None,
        api_paste_name=paste_name,
        api_paste_expire_date=expire_date.encode() if expire_date is not None else None,
        api_paste_format=paste_format,
    )
    log.debug("Built paste request with fields: %s", ", ".join(request.to_form()))
    return request
