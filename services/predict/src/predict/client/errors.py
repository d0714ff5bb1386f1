"""Backend client errors. str(exc) is the detail surfaced to API callers."""


class BackendError(Exception):
    """Base class for every failure of a backend generation call."""

    kind = "backend"


class BackendTransportError(BackendError):
    """Connection, DNS or protocol failure talking to the backend."""

    kind = "transport"


class BackendTimeoutError(BackendTransportError):
    """Backend call exceeded the whole-call deadline."""

    kind = "timeout"

    def __init__(self, timeout: float) -> None:
        super().__init__(f"backend request timed out after {timeout:g}s")


class BackendStatusError(BackendError):
    """Backend answered with a non-200 status."""

    kind = "status"

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"ollama error: status={status_code} body={body}")


class BackendDecodeError(BackendError):
    """Backend answered 200 with a payload that is not a generation response."""

    kind = "decode"
