from recaptcha_verifier.schemas.recaptcha import ConfirmationReply, ConfirmationRequest

__all__ = [
    "ConfirmationReply",
    "ConfirmationRequest",
]
