from typing import Any


class ApiError(Exception):
    """
    A failed call against the backend, normalized so callers only handle one shape.

    ``status`` and ``data`` are set for application errors (non-2xx responses);
    both are ``None`` for transport failures, which use :class:`NetworkError`.
    """

    is_network_error = False

    def __init__(self, message: str, status: int | None = None, data: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data

    @property
    def is_unauthorized(self) -> bool:
        return self.status == 401

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status={self.status!r})"


class NetworkError(ApiError):
    """No response was received (connection refused, DNS failure, timeout)."""

    is_network_error = True

    def __init__(self, message: str, base_url: str):
        super().__init__(message)
        self.base_url = base_url
