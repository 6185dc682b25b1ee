"""
Structured logging configuration.

Log lines are emitted as JSON so they can be shipped and searched
without parsing free text. Ledger fields such as transaction_id
are passed through the standard `extra` argument:

    logger.info("Transaction committed", extra={"transaction_id": txn.id})
"""

import json
import logging
from datetime import datetime, timezone

ROOT_LOGGER = "ledger_core"

# Record attributes copied into the JSON line when present
CONTEXT_FIELDS = ("transaction_id", "account_id", "action")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_entry[field] = value

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "INFO", logger_name: str = ROOT_LOGGER) -> logging.Logger:
    """
    Configure the package logger with a single JSON stream handler.

    Safe to call more than once; existing handlers are replaced.
    """
    logger = logging.getLogger(logger_name)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
