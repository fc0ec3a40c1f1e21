"""
HTTP reachability probe tests.

Uses httpx.MockTransport; no network access.
"""

from __future__ import annotations

import httpx
import pytest

from src.adapters.http_probe import ping


def make_client(handler) -> tuple[httpx.Client, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    return httpx.Client(transport=httpx.MockTransport(record)), seen


class TestPing:
    def test_ok_is_up(self) -> None:
        client, seen = make_client(lambda request: httpx.Response(200))

        assert ping("https://forum.example.com/", client=client) is True
        assert seen[0].method == "HEAD"

    @pytest.mark.parametrize("status", [204, 304])
    def test_below_400_is_up(self, status: int) -> None:
        client, _ = make_client(lambda request: httpx.Response(status))
        assert ping("https://forum.example.com/", client=client) is True

    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    def test_error_status_is_down(self, status: int) -> None:
        client, _ = make_client(lambda request: httpx.Response(status))
        assert ping("https://forum.example.com/", client=client) is False

    def test_redirect_not_followed(self) -> None:
        client, seen = make_client(
            lambda request: httpx.Response(301, headers={"Location": "https://elsewhere.example/"})
        )

        assert ping("https://forum.example.com/", client=client) is True
        assert len(seen) == 1

    def test_connection_error_is_down(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client(refuse)
        assert ping("https://forum.example.com/", client=client) is False

    def test_timeout_is_down(self) -> None:
        def slow(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client, _ = make_client(slow)
        assert ping("https://forum.example.com/", client=client, timeout=0.1) is False

    def test_not_a_url_is_down(self) -> None:
        assert ping("not a url") is False

    def test_host_name_encoding_error_is_down(self) -> None:
        """IDNA failures on the host name surface as UnicodeError."""

        def bad_host(request: httpx.Request) -> httpx.Response:
            raise UnicodeError("encoding with 'idna' codec failed (label empty or too long)")

        client, _ = make_client(bad_host)
        assert ping("https://forum.example.com/", client=client) is False

    def test_overlong_host_label_is_down(self) -> None:
        """DNS labels are limited to 63 characters."""
        assert ping("http://" + "a" * 70 + ".com/", timeout=0.5) is False
