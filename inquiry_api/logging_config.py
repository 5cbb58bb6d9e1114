# inquiry_api/logging_config.py
import logging
import logging.config
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def build_logging_config(log_dir: str, level: str = "INFO") -> dict:
    """One console + one rotating file; uvicorn and inquiry_api both land in app.log."""
    handlers = ["console", "file"]
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": LOG_FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "standard",
                "filename": str(Path(log_dir) / "app.log"),
                "maxBytes": 5 * 1024 * 1024,  # 5 MB
                "backupCount": 5,
                "encoding": "utf-8",
            },
        },
        # uvicorn installs its own handlers unless we claim its loggers here
        "loggers": {
            name: {"handlers": handlers, "level": level, "propagate": False}
            for name in ("uvicorn", "uvicorn.error", "uvicorn.access")
        },
        "root": {"handlers": handlers, "level": level},
    }


def setup_logging(log_dir: str, level: str = "INFO") -> dict:
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    cfg = build_logging_config(log_dir, level)
    logging.config.dictConfig(cfg)
    logging.getLogger("inquiry_api").info("Logging initialized → %s", Path(log_dir) / "app.log")
    return cfg
