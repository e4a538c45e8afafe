"""Google reCAPTCHA server-side verification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from recaptcha_verifier.core.config import DEFAULT_VERIFY_URL, get_settings
from recaptcha_verifier.core.errors import DecodeError, EmptySecretError, TransportError
from recaptcha_verifier.schemas.recaptcha import ConfirmationReply, ConfirmationRequest
from recaptcha_verifier.services.http import HTTPClient, HttpxClient

if TYPE_CHECKING:
    from recaptcha_verifier.core.config import Settings

logger = logging.getLogger(__name__)

VERIFY_URL = DEFAULT_VERIFY_URL
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def describe_transport_error(e: Exception) -> str:
    """Return a short message for a failed request that never echoes the form body."""
    if isinstance(e, httpx.TimeoutException):
        return "reCAPTCHA verification timed out"
    if isinstance(e, httpx.ConnectError):
        return "reCAPTCHA verification connection failed"
    if isinstance(e, httpx.HTTPStatusError):
        return f"reCAPTCHA verification returned HTTP {e.response.status_code}"
    if isinstance(e, httpx.HTTPError):
        return "reCAPTCHA verification request failed"
    return f"reCAPTCHA verification request failed: {type(e).__name__}"


class ReCaptcha:
    """Verifies reCAPTCHA response tokens against the siteverify endpoint.

    ``client`` may be replaced after construction, e.g. with a fake in tests.
    It must be safe for concurrent use if the verifier is shared between
    threads.
    """

    def __init__(
        self,
        secret: str,
        *,
        verify_url: str = VERIFY_URL,
        client: HTTPClient | None = None,
    ):
        if not secret:
            raise EmptySecretError
        self._secret = secret
        self._verify_url = verify_url
        self.client: HTTPClient = client if client is not None else HttpxClient()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ReCaptcha:
        """Build a verifier from ``RECAPTCHA_*`` settings."""
        settings = settings or get_settings()
        if not settings.secret_key:
            raise EmptySecretError("RECAPTCHA_SECRET_KEY is not configured")
        return cls(
            settings.secret_key,
            verify_url=settings.verify_url,
            client=HttpxClient(timeout=settings.timeout),
        )

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def verify_url(self) -> str:
        return self._verify_url

    def verify(self, response_token: str, remote_ip: str) -> bool:
        """Verify a token submitted from ``remote_ip``.

        Returns False when the service rejects the token. Raises
        TransportError or DecodeError when no usable reply was received.
        """
        return self.check(response_token, remote_ip).success

    def verify_no_remote_ip(self, response_token: str) -> bool:
        """Verify a token without forwarding the client IP."""
        return self.check(response_token).success

    def check(self, response_token: str, remote_ip: str | None = None) -> ConfirmationReply:
        """Verify a token and return the full reply, including error codes."""
        request = ConfirmationRequest(
            secret=self._secret, response=response_token, remote_ip=remote_ip
        )
        return self._confirm(request)

    def _confirm(self, request: ConfirmationRequest) -> ConfirmationReply:
        body = urlencode(request.to_form()).encode()
        logger.debug(
            "Posting reCAPTCHA verification to %s (remoteip=%s)",
            self._verify_url,
            request.remote_ip is not None,
        )

        try:
            response = self.client.post(self._verify_url, FORM_CONTENT_TYPE, body)
        except httpx.HTTPStatusError as e:
            message = describe_transport_error(e)
            logger.warning(message)
            raise TransportError(message, status_code=e.response.status_code) from e
        except (httpx.HTTPError, OSError) as e:
            message = describe_transport_error(e)
            logger.warning(message)
            raise TransportError(message) from e

        if not 200 <= response.status_code < 300:
            logger.warning("reCAPTCHA verification returned HTTP %s", response.status_code)
            raise TransportError(
                f"reCAPTCHA verification returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            reply = ConfirmationReply.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning("reCAPTCHA reply could not be decoded: %d error(s)", e.error_count())
            raise DecodeError("reCAPTCHA reply is not a valid siteverify response") from e

        if not reply.success:
            logger.info("reCAPTCHA token rejected: %s", reply.error_codes)
        return reply

    def close(self) -> None:
        close = getattr(self.client, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> ReCaptcha:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
