# inquiry_api/config.py
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
# load .env into process env vars (real env wins)
load_dotenv(ROOT / ".env")


def _as_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in ("1", "true", "yes", "y", "on")


def _as_int(name: str, default: int) -> int:
    try:
        return int(str(os.getenv(name, default)).strip())
    except (TypeError, ValueError):
        return default


def _as_list(name: str, default: str = "") -> list[str]:
    """
    Accepts:  'https://a.example, https://b.example'
    Returns:  ['https://a.example', 'https://b.example']
    """
    raw = os.getenv(name, default) or ""
    return [p.strip() for p in raw.split(",") if p.strip()]


class Settings:
    """Runtime configuration, read from the environment at construction time."""

    def __init__(self) -> None:
        # App
        self.ENV: str = os.getenv("ENV") or os.getenv("NODE_ENV") or "development"
        self.PORT: int = _as_int("PORT", 5000)
        self.TZ: str = os.getenv("TZ", "Asia/Kolkata")
        self.STATIC_DIR: str = os.getenv("STATIC_DIR", str(ROOT / "dist"))
        self.CORS_ORIGINS: list[str] = _as_list("CORS_ORIGINS", "*")

        # Branding
        self.BRAND_NAME: str = os.getenv("BRAND_NAME", "Agni Shorts")
        self.ALT_CONTACT: str = os.getenv("ALT_CONTACT", "WhatsApp")

        # Email
        self.SMTP_HOST: str = os.getenv("SMTP_HOST", "smtp.gmail.com").strip()
        self.SMTP_PORT: int = _as_int("SMTP_PORT", 587)
        self.SMTP_USER: str = os.getenv("SMTP_USER", "").strip()
        self.SMTP_PASS: str = os.getenv("SMTP_PASS", "").strip()
        self.FROM_EMAIL: str = (os.getenv("FROM_EMAIL") or self.SMTP_USER or "no-reply@example.com").strip()
        self.TARGET_EMAIL: str = os.getenv("TARGET_EMAIL", "").strip()
        self.SENDGRID_API_KEY: str = os.getenv("SENDGRID_API_KEY", "").strip()
        self.EMAIL_DRY_RUN: bool = _as_bool("EMAIL_DRY_RUN", False)
        self.EMAIL_TIMEOUT_SECONDS: int = _as_int("EMAIL_TIMEOUT_SECONDS", 20)
        self.VERIFY_TRANSPORT_ON_STARTUP: bool = _as_bool("VERIFY_TRANSPORT_ON_STARTUP", True)

        # Logging
        self.LOG_DIR: str = os.getenv("LOG_DIR", str(ROOT / "logs"))
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def missing_mail_settings(self) -> list[str]:
        """Names of the mail settings that are unset; empty when mail is fully configured."""
        missing = []
        if not self.SENDGRID_API_KEY:
            if not self.SMTP_USER:
                missing.append("SMTP_USER")
            if not self.SMTP_PASS:
                missing.append("SMTP_PASS")
        if not self.TARGET_EMAIL:
            missing.append("TARGET_EMAIL")
        return missing


def get_settings() -> Settings:
    return Settings()
