# inquiry_api/services/email.py
from __future__ import annotations

import json
import logging
import smtplib
import ssl
import urllib.request
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr
from typing import Protocol
from urllib.error import HTTPError, URLError

from inquiry_api.config import Settings
from inquiry_api.errors import DeliveryError

log = logging.getLogger(__name__)

SENDGRID_URL = "https://api.sendgrid.com/v3/mail/send"


@dataclass(frozen=True)
class MailMessage:
    from_name: str
    from_email: str
    to: str
    reply_to: str | None
    subject: str
    html: str
    text: str = ""


class MailTransport(Protocol):
    def send(self, message: MailMessage) -> None:
        ...

    def verify(self) -> bool:
        ...


# ---- internal helpers --------------------------------------------------------


def _to_email_message(message: MailMessage) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = formataddr((message.from_name, message.from_email))
    msg["To"] = message.to
    msg["Subject"] = message.subject
    if message.reply_to:
        msg["Reply-To"] = message.reply_to
    msg.set_content(message.text or "")
    msg.add_alternative(message.html, subtype="html")
    return msg


def _sendgrid_payload(message: MailMessage) -> dict:
    payload = {
        "personalizations": [{"to": [{"email": message.to}]}],
        "from": {"email": message.from_email, "name": message.from_name or message.from_email},
        "subject": message.subject,
        "content": [{"type": "text/plain", "value": message.text or ""}],
    }
    payload["content"].append({"type": "text/html", "value": message.html})
    if message.reply_to:
        payload["reply_to"] = {"email": message.reply_to}
    return payload


def _detect_sendgrid_api_key(settings: Settings) -> str | None:
    """
    Prefer explicit SENDGRID_API_KEY; otherwise, if SMTP is pointed at SendGrid
    (host=smtp.sendgrid.net, user=apikey) with an SG.* password, use that.
    """
    if settings.SENDGRID_API_KEY:
        return settings.SENDGRID_API_KEY
    host = (settings.SMTP_HOST or "").lower().strip()
    if host == "smtp.sendgrid.net" and settings.SMTP_USER == "apikey" and settings.SMTP_PASS.startswith("SG."):
        return settings.SMTP_PASS
    return None


# ---- transports --------------------------------------------------------------


class SmtpTransport:
    """STARTTLS submission. One connection per send; holds no live socket."""

    def __init__(self, host: str, port: int = 587, username: str = "", password: str = "", timeout: int = 20):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.timeout = timeout

    def _handshake(self, s: smtplib.SMTP) -> None:
        context = ssl.create_default_context()
        s.ehlo()
        s.starttls(context=context)
        s.ehlo()
        if self.username and self.password:
            s.login(self.username, self.password)

    def send(self, message: MailMessage) -> None:
        try:
            msg = _to_email_message(message)
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as s:
                self._handshake(s)
                s.send_message(msg)
        except (smtplib.SMTPException, OSError, ValueError) as e:
            # ValueError: header values EmailMessage refuses (e.g. embedded CR/LF)
            raise DeliveryError(f"SMTP send via {self.host}:{self.port} failed: {e}") from e
        log.info("SMTP send ok → %s via %s:%s", message.to, self.host, self.port)

    def verify(self) -> bool:
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as s:
                self._handshake(s)
                s.noop()
        except (smtplib.SMTPException, OSError) as e:
            log.error("SMTP configuration error (%s:%s): %s", self.host, self.port, e)
            return False
        log.info("SMTP server %s:%s is ready to take our messages", self.host, self.port)
        return True


class SendGridTransport:
    """SendGrid v3 HTTP API."""

    def __init__(self, api_key: str, timeout: int = 20, url: str = SENDGRID_URL):
        self.api_key = api_key
        self.timeout = timeout
        self.url = url

    def send(self, message: MailMessage) -> None:
        req = urllib.request.Request(
            self.url,
            data=json.dumps(_sendgrid_payload(message)).encode("utf-8"),
            headers={"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"},
            method="POST",
        )
        try:
            with urllib.request.urlopen(req, timeout=self.timeout):
                pass
        except HTTPError as e:
            try:
                body = e.read().decode("utf-8", "ignore")
            except OSError:
                body = "<no body>"
            raise DeliveryError(f"SendGrid HTTP {e.code}: {body}") from e
        except URLError as e:
            raise DeliveryError(f"SendGrid network error: {e}") from e
        log.info("SendGrid API send ok → %s", message.to)

    def verify(self) -> bool:
        # no cheap reachability probe without spending a send; key presence only
        return bool(self.api_key)


class DryRunTransport:
    """Logs the message instead of sending it."""

    def send(self, message: MailMessage) -> None:
        log.info("[EMAIL DRY RUN] to=%s reply_to=%s subject=%s", message.to, message.reply_to, message.subject)

    def verify(self) -> bool:
        return True


# ---- public API --------------------------------------------------------------


def build_transport(settings: Settings) -> MailTransport:
    """
    Pick the transport from configuration:
    - EMAIL_DRY_RUN → DryRunTransport
    - SendGrid API key (explicit or SendGrid SMTP creds) → SendGridTransport
    - otherwise → SmtpTransport
    """
    if settings.EMAIL_DRY_RUN:
        log.info("Email transport: dry run")
        return DryRunTransport()

    api_key = _detect_sendgrid_api_key(settings)
    if api_key:
        log.info("Email transport: SendGrid API")
        return SendGridTransport(api_key, timeout=settings.EMAIL_TIMEOUT_SECONDS)

    log.info("Email transport: SMTP %s:%s", settings.SMTP_HOST, settings.SMTP_PORT)
    return SmtpTransport(
        settings.SMTP_HOST,
        settings.SMTP_PORT,
        settings.SMTP_USER,
        settings.SMTP_PASS,
        timeout=settings.EMAIL_TIMEOUT_SECONDS,
    )
