"""Error kind and status code constants.

Kinds are stable machine-readable names for the closed error taxonomy and are
used as structured log values. Status codes are transport hints only.
"""

from http import HTTPStatus

# Kinds
FORBIDDEN = "forbidden"
UNAUTHORIZED = "unauthorized"
VALIDATION_ERROR = "validation_error"
SERVER_ERROR = "server_error"

# Status hints
STATUS_OK = int(HTTPStatus.OK)
STATUS_UNAUTHORIZED = int(HTTPStatus.UNAUTHORIZED)
STATUS_FORBIDDEN = int(HTTPStatus.FORBIDDEN)
STATUS_UNPROCESSABLE = int(HTTPStatus.UNPROCESSABLE_ENTITY)
STATUS_INTERNAL = int(HTTPStatus.INTERNAL_SERVER_ERROR)

# Generic messages that never carry internal diagnostics.
ENCRYPTION_FAILED = "encryption failed"
VERIFICATION_FAILED = "password verification failed"
UNEXPECTED_ERROR = "an unexpected error occurred"
