# inquiry_api/services/templates.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from html import escape
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from inquiry_api.config import Settings
from inquiry_api.schemas import InquiryIn
from inquiry_api.services.email import MailMessage

log = logging.getLogger(__name__)


def _e(value: str | None) -> str:
    # text nodes only; quotes stay readable
    return escape(value or "", quote=False)


def _attr(value: str | None) -> str:
    return escape(value or "", quote=True)


def header_safe(value: str | None) -> str:
    """Collapse every run of whitespace (newlines included) to one space."""
    return " ".join((value or "").split())


def format_submitted_at(when: datetime, tz_name: str | None = None) -> str:
    """
    Pretty local time for the notification.

    Example: 10/19/2026 2:05 PM IST
    """
    try:
        tz = ZoneInfo(tz_name) if tz_name else timezone.utc
    except (ZoneInfoNotFoundError, ValueError):
        log.warning("Unknown TZ %r; falling back to UTC", tz_name)
        tz = timezone.utc
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    s = when.astimezone(tz).strftime("%m/%d/%Y %I:%M %p %Z")
    return s.lstrip("0").replace("/0", "/").replace(" 0", " ")


def inquiry_subject(name: str, brand: str) -> str:
    return f"New Inquiry from {name} - {brand}"


def inquiry_html(sub: InquiryIn, submitted_at: str, brand: str) -> str:
    phone_html = (
        f'<p><strong>Phone:</strong> <a href="tel:{_attr(sub.phone)}">{_e(sub.phone)}</a></p>'
        if sub.phone
        else ""
    )
    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
      <div style="text-align: center; margin-bottom: 30px;">
        <h1 style="color: #f97316; margin-bottom: 5px;">{_e(brand)}</h1>
        <p style="color: #666; margin: 0;">New Inquiry Received</p>
      </div>

      <div style="background: #f9f9f9; padding: 20px; border-radius: 10px; margin-bottom: 20px;">
        <h2 style="color: #333; margin-top: 0;">Contact Details</h2>
        <p><strong>Name:</strong> {_e(sub.name)}</p>
        <p><strong>Email:</strong> <a href="mailto:{_attr(sub.email)}">{_e(sub.email)}</a></p>
        {phone_html}
        <p><strong>Submitted:</strong> {_e(submitted_at)}</p>
      </div>

      <div style="background: #fff; padding: 20px; border: 1px solid #ddd; border-radius: 10px;">
        <h3 style="color: #333; margin-top: 0;">Message</h3>
        <div style="background: #f8f8f8; padding: 15px; border-radius: 5px; white-space: pre-wrap;">{_e(sub.message)}</div>
      </div>

      <div style="text-align: center; margin-top: 30px; color: #666; font-size: 14px;">
        <p>This inquiry was sent through the {_e(brand)} contact form.</p>
      </div>
    </div>
    """.strip()


def inquiry_text(sub: InquiryIn, submitted_at: str, brand: str) -> str:
    lines = [
        f"New inquiry received via the {brand} contact form.",
        "",
        f"Name:      {sub.name}",
        f"Email:     {sub.email}",
    ]
    if sub.phone:
        lines.append(f"Phone:     {sub.phone}")
    lines += [
        f"Submitted: {submitted_at}",
        "",
        "Message:",
        sub.message or "",
    ]
    return "\n".join(lines)


def build_inquiry_message(sub: InquiryIn, settings: Settings, submitted: datetime) -> MailMessage:
    """Render a validated submission into the notification sent to TARGET_EMAIL."""
    submitted_at = format_submitted_at(submitted, settings.TZ)
    brand = settings.BRAND_NAME
    # validated names may hold \n or \t; headers need a single line
    display_name = header_safe(sub.name)
    return MailMessage(
        from_name=display_name,
        from_email=settings.FROM_EMAIL,
        to=settings.TARGET_EMAIL,
        reply_to=sub.email,
        subject=inquiry_subject(display_name, brand),
        html=inquiry_html(sub, submitted_at, brand),
        text=inquiry_text(sub, submitted_at, brand),
    )
