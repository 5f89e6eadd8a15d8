import datetime
import json
import logging

SERVICE_NAME = 'crud_service'
EXTRA_FIELDS = ('endpoint', 'user_id', 'product_id', 'status_code')

logger = logging.getLogger(SERVICE_NAME)


def _utc_timestamp():
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat().replace('+00:00', 'Z')


class JSONFormatter(logging.Formatter):
    """One JSON object per line, carrying request context passed via ``extra``."""

    def format(self, record):
        entry = dict(
            timestamp=_utc_timestamp(),
            level=record.levelname,
            service=SERVICE_NAME,
            message=record.getMessage(),
            module=record.module,
            function=record.funcName,
            line=record.lineno,
        )
        entry.update((field, getattr(record, field)) for field in EXTRA_FIELDS if hasattr(record, field))
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(level='INFO'):
    logger.setLevel(level)

    # create_app may run more than once per process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    return logger
