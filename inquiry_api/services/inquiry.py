# inquiry_api/services/inquiry.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from inquiry_api.config import Settings
from inquiry_api.errors import ConfigurationError, DeliveryError, ValidationError
from inquiry_api.schemas import InquiryIn, Outcome, SubmissionResult
from inquiry_api.services.email import MailTransport
from inquiry_api.services.templates import build_inquiry_message
from inquiry_api.services.validation import validate_submission

log = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Your message has been sent successfully! We will get back to you soon."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InquiryHandler:
    """
    Validate → render → deliver, once per submission.

    Holds only the transport and settings it was built with, so one instance
    serves every request.
    """

    def __init__(self, transport: MailTransport, settings: Settings, clock: Callable[[], datetime] = _utcnow):
        self.transport = transport
        self.settings = settings
        self.clock = clock

    @property
    def failure_message(self) -> str:
        return (
            "Failed to send your message. Please try again later "
            f"or contact us via {self.settings.ALT_CONTACT}."
        )

    def _failed(self) -> SubmissionResult:
        return SubmissionResult(success=False, message=self.failure_message, outcome=Outcome.FAILED)

    def submit(self, sub: InquiryIn) -> SubmissionResult:
        try:
            validate_submission(sub)
        except ValidationError as e:
            log.info("Inquiry rejected (%s)", e.rule)
            return SubmissionResult(success=False, message=e.reason, outcome=Outcome.REJECTED)

        try:
            self._deliver(sub)
        except ConfigurationError as e:
            log.error("Inquiry not sent, configuration error: %s", e)
            return self._failed()
        except DeliveryError as e:
            log.error("Error sending email from %s (%s): %s", sub.name, sub.email, e)
            return self._failed()
        except Exception:
            # transports are third-party code; anything they raise is a failed delivery
            log.exception("Unexpected error sending email from %s (%s)", sub.name, sub.email)
            return self._failed()

        log.info("Email sent successfully from %s (%s)", sub.name, sub.email)
        return SubmissionResult(success=True, message=SUCCESS_MESSAGE, outcome=Outcome.ACCEPTED)

    def _deliver(self, sub: InquiryIn) -> None:
        if not self.settings.TARGET_EMAIL:
            raise ConfigurationError("Target email not configured (TARGET_EMAIL)")
        message = build_inquiry_message(sub, self.settings, self.clock())
        self.transport.send(message)
