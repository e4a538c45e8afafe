"""Exceptions raised by the reCAPTCHA verifier.

A reply with ``success: false`` is a normal negative result and never
raises. Only construction and transport/decoding problems do.
"""


class ReCaptchaError(Exception):
    """Base class for all verifier errors."""


class EmptySecretError(ReCaptchaError, ValueError):
    """Raised when a verifier is constructed without a secret key."""

    def __init__(self, message: str = "reCAPTCHA secret key must not be empty"):
        super().__init__(message)


class TransportError(ReCaptchaError):
    """Raised when the verification request could not be completed.

    Covers connection failures, timeouts and non-2xx statuses. ``status_code``
    is set when the server answered.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ReCaptchaError):
    """Raised when the verification reply is not the expected JSON object."""
