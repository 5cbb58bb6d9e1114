from datetime import datetime, timezone

from inquiry_api.schemas import InquiryIn
from inquiry_api.services.templates import (
    build_inquiry_message,
    format_submitted_at,
    header_safe,
    inquiry_html,
    inquiry_subject,
)

WHEN = datetime(2026, 3, 5, 9, 7, tzinfo=timezone.utc)


def test_subject_names_sender_and_brand():
    assert inquiry_subject("Jane Doe", "Agni Shorts") == "New Inquiry from Jane Doe - Agni Shorts"


def test_format_submitted_at_converts_timezone():
    assert format_submitted_at(WHEN, "UTC") == "3/5/2026 9:07 AM UTC"
    assert format_submitted_at(WHEN, "Asia/Kolkata") == "3/5/2026 2:37 PM IST"


def test_format_submitted_at_unknown_zone_falls_back_to_utc():
    assert format_submitted_at(WHEN, "Not/AZone") == "3/5/2026 9:07 AM UTC"


def test_html_contains_contact_details_and_message():
    sub = InquiryIn(name="Jane Doe", email="jane@example.com", phone="+91 98765 43210",
                    message="Line one\n  indented line two")
    html = inquiry_html(sub, "3/5/2026 9:07 AM UTC", "Agni Shorts")

    assert "Jane Doe" in html
    assert '<a href="mailto:jane@example.com">jane@example.com</a>' in html
    assert '<a href="tel:+91 98765 43210">+91 98765 43210</a>' in html
    assert "3/5/2026 9:07 AM UTC" in html
    assert "white-space: pre-wrap" in html
    assert "Line one\n  indented line two" in html


def test_html_omits_phone_when_blank():
    sub = InquiryIn(name="Jane Doe", email="jane@example.com", phone="", message="I would like a quote please.")
    assert "Phone:" not in inquiry_html(sub, "now", "Agni Shorts")


def test_html_escapes_markup_in_message():
    sub = InquiryIn(name="Jane Doe", email="jane@example.com", message="<script>alert(1)</script> & more")
    html = inquiry_html(sub, "now", "Agni Shorts")
    assert "<script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt; &amp; more" in html


def test_build_inquiry_message_addresses(settings):
    sub = InquiryIn(name="Jane Doe", email="jane@example.com", phone="", message="I would like a quote please.")
    msg = build_inquiry_message(sub, settings, WHEN)

    assert msg.to == "owner@agnishorts.test"
    assert msg.reply_to == "jane@example.com"
    assert msg.from_name == "Jane Doe"
    assert msg.from_email == "relay@agnishorts.test"
    assert "Jane Doe" in msg.subject
    assert "I would like a quote please." in msg.html
    assert "I would like a quote please." in msg.text
    assert "Submitted: 3/5/2026 9:07 AM UTC" in msg.text


def test_header_safe_collapses_whitespace():
    assert header_safe("Jane\nDoe") == "Jane Doe"
    assert header_safe("  Mary \t\r\n Ann  ") == "Mary Ann"
    assert header_safe(None) == ""


def test_build_inquiry_message_keeps_headers_single_line(settings):
    sub = InquiryIn(name="Jane\r\nDoe", email="jane@example.com", message="I would like a quote please.")
    msg = build_inquiry_message(sub, settings, WHEN)

    assert msg.from_name == "Jane Doe"
    assert msg.subject == "New Inquiry from Jane Doe - Agni Shorts"
    assert "\n" not in msg.subject and "\r" not in msg.subject
