# inquiry_api/errors.py


class InquiryError(Exception):
    """Base class for failures while handling an inquiry."""


class ValidationError(InquiryError):
    """Submitted data broke a field rule. Safe to show to the caller."""

    def __init__(self, rule: str, reason: str):
        super().__init__(reason)
        self.rule = rule
        self.reason = reason


class ConfigurationError(InquiryError):
    """Operator configuration needed to deliver the inquiry is missing."""


class DeliveryError(InquiryError):
    """The mail transport failed or rejected the send."""
