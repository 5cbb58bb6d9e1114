# inquiry_api/schemas.py
from enum import Enum

from pydantic import BaseModel


class InquiryIn(BaseModel):
    # Every field optional here; required/format checks live in services.validation
    # so the caller gets our messages (and a 400) instead of a framework 422.
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    message: str | None = None


class Outcome(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    FAILED = "failed"


class SubmissionResult(BaseModel):
    success: bool
    message: str
    outcome: Outcome

    @property
    def status_code(self) -> int:
        return {
            Outcome.ACCEPTED: 200,
            Outcome.REJECTED: 400,
            Outcome.FAILED: 500,
        }[self.outcome]


class InquiryOut(BaseModel):
    success: bool
    message: str


class HealthOut(BaseModel):
    status: str
    timestamp: str
    environment: str
