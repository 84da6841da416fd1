"""Shared constants for the operator console."""

CONSOLE_VERSION = "0.3.0"

# Remote API
DEFAULT_API_BASE_URL = "http://localhost:8080/api/v1"
DEFAULT_API_TIMEOUT = 30.0
OPERATORS_PATH = "/operators"

# Environment variables read by ConsoleConfig.from_env()
ENV_API_URL = "SMSC_API_URL"
ENV_API_TOKEN = "SMSC_API_TOKEN"
ENV_API_TIMEOUT = "SMSC_API_TIMEOUT"

# Seconds a notification stays visible before dismissing itself
NOTIFICATION_TIMEOUT = 6.0

# User-facing messages
MSG_OPERATOR_ADDED = "Operator added successfully"
MSG_OPERATOR_UPDATED = "Operator updated successfully"
MSG_OPERATOR_DELETED = "Operator deleted successfully"
MSG_LOAD_FAILED = "Failed to load operators"
MSG_SAVE_FAILED = "Failed to save operator"
MSG_DELETE_FAILED = "Failed to delete operator"
MSG_INVALID_RESPONSE = "Invalid response format from server"
