"""Server-side verification of Google reCAPTCHA response tokens."""

from recaptcha_verifier.core.errors import (
    DecodeError,
    EmptySecretError,
    ReCaptchaError,
    TransportError,
)
from recaptcha_verifier.schemas.recaptcha import ConfirmationReply, ConfirmationRequest
from recaptcha_verifier.services.http import HTTPClient, HttpxClient
from recaptcha_verifier.services.recaptcha import VERIFY_URL, ReCaptcha

__all__ = [
    "VERIFY_URL",
    "ConfirmationReply",
    "ConfirmationRequest",
    "DecodeError",
    "EmptySecretError",
    "HTTPClient",
    "HttpxClient",
    "ReCaptcha",
    "ReCaptchaError",
    "TransportError",
]
