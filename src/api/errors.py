"""Error taxonomy for the operator console."""

from constants import MSG_INVALID_RESPONSE


class ConsoleError(Exception):
    """Base class for every failure the console knows how to report."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ConsoleError):
    """Raised before any network call when a draft cannot be submitted."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class NetworkError(ConsoleError):
    """Transport failure or non-2xx response without a structured error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ConsoleError):
    """Response body present but not parseable as the expected JSON shape."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(MSG_INVALID_RESPONSE)
        self.detail = detail


class ServerError(ConsoleError):
    """Non-2xx response carrying a JSON ``error`` field."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code
