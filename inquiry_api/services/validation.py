# inquiry_api/services/validation.py
"""
Field rules for an inquiry submission.

Rules are evaluated in the order of ``RULES``; the first one that fails
decides the rejection reason and the rest are not checked.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from inquiry_api.errors import ValidationError
from inquiry_api.schemas import InquiryIn

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
NAME_RE = re.compile(r"[A-Za-z\s]+")
MIN_MESSAGE_LENGTH = 10


@dataclass(frozen=True)
class ValidationRule:
    name: str
    check: Callable[[InquiryIn], bool]
    reason: str


def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def has_required_fields(sub: InquiryIn) -> bool:
    return _present(sub.name) and _present(sub.email) and _present(sub.message)


def has_valid_email(sub: InquiryIn) -> bool:
    return EMAIL_RE.fullmatch(sub.email or "") is not None


def has_valid_name(sub: InquiryIn) -> bool:
    # ASCII letters and whitespace only
    return NAME_RE.fullmatch(sub.name or "") is not None


def has_long_enough_message(sub: InquiryIn) -> bool:
    return len(sub.message or "") >= MIN_MESSAGE_LENGTH


RULES: tuple[ValidationRule, ...] = (
    ValidationRule(
        "required_fields",
        has_required_fields,
        "Name, email, and message are required fields.",
    ),
    ValidationRule(
        "email_format",
        has_valid_email,
        "Please provide a valid email address.",
    ),
    ValidationRule(
        "name_format",
        has_valid_name,
        "Name should contain only letters and spaces.",
    ),
    ValidationRule(
        "message_length",
        has_long_enough_message,
        f"Message must be at least {MIN_MESSAGE_LENGTH} characters long.",
    ),
)

MISSING_FIELDS_REASON = RULES[0].reason


def first_violation(sub: InquiryIn, rules: tuple[ValidationRule, ...] = RULES) -> Optional[ValidationRule]:
    for rule in rules:
        if not rule.check(sub):
            return rule
    return None


def validate_submission(sub: InquiryIn) -> None:
    """Raise ValidationError for the first broken rule; return quietly otherwise."""
    rule = first_violation(sub)
    if rule is not None:
        raise ValidationError(rule.name, rule.reason)
