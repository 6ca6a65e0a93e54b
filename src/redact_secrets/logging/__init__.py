"""
Secret-safe logging for redact-secrets.

Hooks the redaction engine into the standard library logging pipeline so
payloads are sanitized before any handler formats them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from redact_secrets.engine.redactor import Redactor
from redact_secrets.values import GenericMapping, is_mapping

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class RedactionFilter(logging.Filter):
    """Redact mapping payloads attached to log records.

    Covers a mapping passed as the message (``logger.info(payload)``), the
    single-mapping ``record.args`` form (``logger.info("%(token)s", payload)``),
    mappings among positional args (``logger.info("vars %s", payload)``) and
    the record attributes named in ``attributes``, which callers set with
    ``extra=``. Records are always passed on.
    """

    def __init__(self, redactor: Redactor, attributes: Sequence[str] = ("payload",)) -> None:
        super().__init__()
        self.redactor = redactor
        self.attributes = tuple(attributes)

    def filter(self, record: logging.LogRecord) -> bool:
        if is_mapping(record.msg):
            record.msg = self.redactor(record.msg)
        if is_mapping(record.args):
            record.args = self.redactor(record.args)  # type: ignore[arg-type]
        elif isinstance(record.args, tuple):
            record.args = tuple(
                self.redactor(arg) if is_mapping(arg) else arg for arg in record.args
            )
        for attribute in self.attributes:
            value = getattr(record, attribute, None)
            if is_mapping(value):
                setattr(record, attribute, self.redactor(value))
        return True


def log_payload(
    logger: logging.Logger,
    level: int,
    message: str,
    payload: GenericMapping,
    redactor: Redactor,
) -> None:
    """Log ``message`` with a redacted copy of ``payload`` appended."""
    if not logger.isEnabledFor(level):
        return
    redacted = redactor(payload)
    logger.log(
        level,
        "%s %s",
        message,
        json.dumps(redacted, default=str),
        extra={"payload": redacted},
    )


def configure_logging(level: str | int = logging.WARNING, **kwargs: Any) -> None:
    """Configure root logging with the package format."""
    logging.basicConfig(level=level, format=LOG_FORMAT, **kwargs)


__all__ = ["LOG_FORMAT", "RedactionFilter", "configure_logging", "log_payload"]
