"""Errors raised by the persistence adapter and the request forms.

Each carries the fixed message returned to the client and the HTTP status
it is reported with.
"""


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class NotFound(ServiceError):
    status_code = 404


class ValidationError(ServiceError):
    status_code = 400


class PersistenceError(ServiceError):
    # the client sees storage failures the same way as a missing row
    status_code = 404
