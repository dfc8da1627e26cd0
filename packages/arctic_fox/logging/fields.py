"""Canonical logging field names for Arctic Fox structured logs.

Keeping names centralized keeps container, hasher and renderer log lines
queryable with one key set.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"

# Container lifecycle fields.
FOX_STATE = "fox_state"
OPERATION = "operation"
ERROR_KIND = "error_kind"
STATUS_CODE = "status_code"

# Credential and failure fields. Never carry secrets.
VIOLATION_COUNT = "violation_count"
EXCEPTION_TYPE = "exception_type"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
