import logging
import logging.config
import re

# Nigerian mobile numbers in the spellings the normalizer accepts:
# +234 / 234 / 0 followed by a 7/8/9 mobile range, with optional separators.
PHONE_PATTERNS = [
    re.compile(r"\+?234[\s.()-]*[789][01](?:[\s.()-]*\d){8}\b"),
    re.compile(r"\b0[789][01](?:[\s.()-]*\d){8}\b"),
    re.compile(r"\b[789][01]\d{8}\b"),
]


class PhoneRedactionFilter(logging.Filter):
    def _sanitize(self, value: object) -> object:
        if not isinstance(value, str):
            return value

        redacted = value
        for pattern in PHONE_PATTERNS:
            redacted = pattern.sub("[REDACTED]", redacted)
        return redacted

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._sanitize(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(self._sanitize(item) for item in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self._sanitize(value) for key, value in record.args.items()}

        return True


def setup_logging() -> None:
    from ngphone.core.settings import get_settings

    settings = get_settings()
    console_filters = ["phone_redaction"] if settings.redact_phone_logs else []
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "phone_redaction": {
                    "()": "ngphone.core.logging.PhoneRedactionFilter",
                }
            },
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": console_filters,
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": settings.log_level.upper(),
                },
                "uvicorn.access": {
                    "handlers": ["console"],
                    "level": "WARNING",
                    "propagate": False,
                },
            },
        }
    )
