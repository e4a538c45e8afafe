"""Wire models for the siteverify endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class ConfirmationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    secret: str
    response: str
    remote_ip: str | None = None

    def to_form(self) -> dict[str, str]:
        """Return the form fields, omitting ``remoteip`` when no IP was given."""
        data = {"secret": self.secret, "response": self.response}
        if self.remote_ip:
            data["remoteip"] = self.remote_ip
        return data


class ConfirmationReply(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool = Field(strict=True)
    challenge_ts: str = ""
    hostname: str = ""
    error_codes: list[str] = Field(default_factory=list, alias="error-codes")
