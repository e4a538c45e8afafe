"""HTTP capability used by the verifier.

The verifier depends on the ``HTTPClient`` protocol, not on httpx, so tests
and callers can substitute any object with a matching ``post`` method.
"""

from typing import Protocol

import httpx

DEFAULT_TIMEOUT = 10.0


class HTTPResponse(Protocol):
    status_code: int
    content: bytes


class HTTPClient(Protocol):
    def post(self, url: str, content_type: str, body: bytes) -> HTTPResponse: ...


class HttpxClient:
    """Default ``HTTPClient`` backed by a pooled ``httpx.Client``.

    Transport failures surface as ``httpx.HTTPError``. Status codes are left
    to the caller to interpret.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, client: httpx.Client | None = None):
        self._client = client or httpx.Client(timeout=timeout)

    def post(self, url: str, content_type: str, body: bytes) -> httpx.Response:
        return self._client.post(url, content=body, headers={"Content-Type": content_type})

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
