"""Tests for the default httpx-backed HTTP client."""

import httpx
import pytest

from recaptcha_verifier.core.errors import TransportError
from recaptcha_verifier.services.http import HttpxClient
from recaptcha_verifier.services.recaptcha import ReCaptcha


def _mock_client(handler) -> HttpxClient:
    return HttpxClient(client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestHttpxClient:
    def test_posts_body_with_content_type(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["content_type"] = request.headers["content-type"]
            seen["body"] = request.content
            return httpx.Response(200, json={"success": True})

        with _mock_client(handler) as client:
            response = client.post(
                "https://example.test/verify", "application/x-www-form-urlencoded", b"a=1"
            )

        assert response.status_code == 200
        assert seen == {
            "method": "POST",
            "url": "https://example.test/verify",
            "content_type": "application/x-www-form-urlencoded",
            "body": b"a=1",
        }

    def test_connection_error_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with _mock_client(handler) as client, pytest.raises(httpx.ConnectError):
            client.post("https://example.test/verify", "text/plain", b"")


class TestReCaptchaOverHttpx:
    def test_end_to_end_success(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert b"response=mycode" in request.content
            return httpx.Response(
                200,
                json={
                    "success": True,
                    "challenge_ts": "2018-03-06T03:41:29+00:00",
                    "hostname": "test.com",
                },
            )

        with ReCaptcha("my secret", client=_mock_client(handler)) as captcha:
            assert captcha.verify("mycode", "127.0.0.1") is True

    def test_server_error_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        with ReCaptcha("my secret", client=_mock_client(handler)) as captcha:
            with pytest.raises(TransportError) as exc_info:
                captcha.verify_no_remote_ip("mycode")
        assert exc_info.value.status_code == 503

    def test_timeout_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with ReCaptcha("my secret", client=_mock_client(handler)) as captcha:
            with pytest.raises(TransportError, match="timed out"):
                captcha.verify_no_remote_ip("mycode")
