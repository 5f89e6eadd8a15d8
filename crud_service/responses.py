import time
from functools import wraps

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from .errors import ServiceError
from .logs import logger
from .metrics import REQUEST_COUNT, REQUEST_DURATION


def envelope(data=None, message=None, error=None, status=200, total_count=None):
    body = {"data": data, "message": message, "error": error}
    if total_count is not None:
        body["totalCount"] = total_count
    return jsonify(body), status


def listing(rows, message, empty_message="no record found"):
    data = [row.to_dict() for row in rows]
    if not data and empty_message:
        message = empty_message
    return envelope(data, message=message, total_count=len(data))


def failure(error, status):
    return envelope(error=error, status=status)


def _record(endpoint, status, start_time):
    REQUEST_COUNT.labels(request.method, endpoint, str(status)).inc()
    REQUEST_DURATION.observe(time.time() - start_time)


def instrumented(view):
    """Log, time and count a view; turn service errors into envelopes."""
    @wraps(view)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        endpoint = request.url_rule.rule
        logger.info(f"{request.method} {request.path}", extra={'endpoint': endpoint})

        try:
            response, status = view(*args, **kwargs)
        except ServiceError as e:
            logger.warning(e.message, extra={'endpoint': endpoint, 'status_code': e.status_code})
            _record(endpoint, e.status_code, start_time)
            return failure(e.message, e.status_code)
        except HTTPException as e:
            # rendered by the app-level HTTP error handler
            _record(endpoint, e.code, start_time)
            raise
        except Exception:
            logger.exception("Unhandled error", extra={'endpoint': endpoint, 'status_code': 500})
            _record(endpoint, 500, start_time)
            return failure("internal server error", 500)

        _record(endpoint, status, start_time)
        logger.info("Request completed", extra={'endpoint': endpoint, 'status_code': status})
        return response, status
    return wrapper
