from collections.abc import Awaitable, Callable

import pytest
from aiohttp import web

from pastebin_client import PastebinApi

API_PATH = "/api/api_post.php"


class FakePastebin:
    """
    In-process stand-in for the paste endpoint.

    Answers every POST with `body`, or with the bytes in `raw` when set, and records the forms.
    """

    def __init__(self) -> None:
        self.body = "https://pastebin.com/abcd1234"
        self.status = 200
        self.raw: bytes | None = None
        self.forms: list[dict[str, str]] = []

    async def handle(self, request: web.Request) -> web.Response:
        form = await request.post()
        self.forms.append({key: str(value) for key, value in form.items()})
        if self.raw is not None:
            return web.Response(body=self.raw, status=self.status)
        return web.Response(text=self.body, status=self.status)


@pytest.fixture
def fake_pastebin() -> FakePastebin:
    return FakePastebin()


@pytest.fixture
async def api(
    fake_pastebin: FakePastebin,
    aiohttp_server: Callable[[web.Application], Awaitable],
) -> PastebinApi:
    app = web.Application()
    app.router.add_post(API_PATH, fake_pastebin.handle)
    server = await aiohttp_server(app)
    return PastebinApi("X", api_url=str(server.make_url(API_PATH)))
