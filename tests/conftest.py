import pytest

from inquiry_api.config import Settings
from inquiry_api.errors import DeliveryError
from inquiry_api.main import create_app


class RecordingTransport:
    """Stands in for SMTP/SendGrid; remembers what it was asked to send."""

    def __init__(self, fail_with: Exception | None = None, reachable: bool = True):
        self.sent = []
        self.fail_with = fail_with
        self.reachable = reachable
        self.verify_calls = 0

    def send(self, message):
        self.sent.append(message)
        if self.fail_with is not None:
            raise self.fail_with

    def verify(self):
        self.verify_calls += 1
        return self.reachable


@pytest.fixture
def settings(tmp_path):
    s = Settings()
    s.ENV = "test"
    s.TZ = "UTC"
    s.BRAND_NAME = "Agni Shorts"
    s.ALT_CONTACT = "WhatsApp"
    s.SMTP_HOST = "smtp.example.com"
    s.SMTP_PORT = 587
    s.SMTP_USER = "relay@agnishorts.test"
    s.SMTP_PASS = "secret"
    s.FROM_EMAIL = "relay@agnishorts.test"
    s.TARGET_EMAIL = "owner@agnishorts.test"
    s.SENDGRID_API_KEY = ""
    s.EMAIL_DRY_RUN = False
    s.VERIFY_TRANSPORT_ON_STARTUP = True
    s.STATIC_DIR = str(tmp_path / "dist")
    s.CORS_ORIGINS = ["*"]
    s.LOG_DIR = str(tmp_path / "logs")
    return s


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def failing_transport():
    return RecordingTransport(fail_with=DeliveryError("535 authentication failed"))


@pytest.fixture
def app(settings, transport):
    return create_app(settings, transport=transport)


@pytest.fixture
def valid_payload():
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "",
        "message": "I would like a quote please.",
    }


class FakeSMTP:
    """Drop-in for smtplib.SMTP that records the conversation."""

    instances = []

    def __init__(self, host, port, timeout=None):
        self.host, self.port, self.timeout = host, port, timeout
        self.calls = []
        self.sent = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.calls.append("quit")
        return False

    def ehlo(self):
        self.calls.append("ehlo")

    def starttls(self, context=None):
        self.calls.append("starttls")

    def login(self, user, password):
        self.calls.append(("login", user, password))

    def send_message(self, msg):
        self.sent.append(msg)

    def noop(self):
        self.calls.append("noop")
