"""Logging setup for the service."""

import logging
import logging.config

from public_brands_api.core.context import get_transaction_id

_LEVELS: dict[str, str] = {
    "DEBUG": "DEBUG",
    "INFO": "INFO",
    "WARN": "WARNING",
    "WARNING": "WARNING",
    "ERROR": "ERROR",
}


class TransactionIdFilter(logging.Filter):
    """Attach the current request's transaction id to every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.transaction_id = get_transaction_id() or "-"
        return True


def configure_logging(level: str) -> None:
    """Configure root logging for the application.

    Unsupported levels fall back to INFO and the fallback is logged.
    """
    requested = level.strip().upper()
    resolved = _LEVELS.get(requested, "INFO")

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "transaction_id": {"()": TransactionIdFilter},
            },
            "formatters": {
                "default": {
                    "format": (
                        "%(asctime)s %(levelname)s [%(name)s] "
                        "transaction_id=%(transaction_id)s %(message)s"
                    ),
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["transaction_id"],
                },
            },
            "root": {"level": resolved, "handlers": ["console"]},
        }
    )

    logger = logging.getLogger(__name__)
    if requested not in _LEVELS:
        logger.error(
            "Requested log level %s is not supported, will default to INFO level",
            level,
        )
    logger.debug("Logging level set to %s", resolved)
