"""Tests for the httpx transport."""

from urllib.parse import parse_qs

import httpx
import pytest

from gd_client.errors import TransportError
from gd_client.transport import HttpxTransport, TransportResult


def _transport(handler) -> HttpxTransport:
    client = httpx.AsyncClient(base_url="http://gd.test/database/", transport=httpx.MockTransport(handler))
    return HttpxTransport("http://gd.test/database", client=client)


class TestHttpxTransport:
    """Form POSTs and failure mapping."""

    @pytest.mark.asyncio
    async def test_posts_form_data(self):
        """Parameters are sent as a form to host/endpoint."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="1:a")

        transport = _transport(handler)
        result = await transport.send("getGJUsers20.php", {"str": "rob", "page": "0"}, timeout=5)
        assert result == TransportResult(status=200, body="1:a")
        assert seen[0].method == "POST"
        assert str(seen[0].url) == "http://gd.test/database/getGJUsers20.php"
        assert parse_qs(seen[0].content.decode()) == {"str": ["rob"], "page": ["0"]}
        await transport.close()

    @pytest.mark.asyncio
    async def test_http_error_status_returned(self):
        """Error statuses are returned, not raised, for the classifier to judge."""
        transport = _transport(lambda request: httpx.Response(500, text="oops"))
        result = await transport.send("x.php", {}, timeout=5)
        assert result.status == 500
        assert not result.ok
        await transport.close()

    @pytest.mark.asyncio
    async def test_connection_error(self):
        """Connection failures raise TransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        transport = _transport(handler)
        with pytest.raises(TransportError):
            await transport.send("x.php", {}, timeout=5)
        await transport.close()

    @pytest.mark.asyncio
    async def test_timeout(self):
        """httpx timeouts raise TransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        transport = _transport(handler)
        with pytest.raises(TransportError):
            await transport.send("x.php", {}, timeout=5)
        await transport.close()

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        """Closing twice is safe."""
        transport = HttpxTransport()
        await transport.close()
        await transport.close()

    def test_default_client_has_empty_user_agent(self):
        """The lazily created client sends an empty User-Agent."""
        transport = HttpxTransport("http://gd.test/database/")
        client = transport._get_client()
        assert client.headers["User-Agent"] == ""
        assert transport.host == "http://gd.test/database"
