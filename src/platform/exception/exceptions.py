class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ApiRequestError(CustomBaseError):
    """
    Raised by driven adapters when a backend call fails.

    status_code is the HTTP status when the backend answered, 0 for transport
    failures (connection refused, timeout, ...). server_message holds the
    backend's `message` field when the error body carried one.
    """

    def __init__(
        self, message: str, status_code: int = 0, *, server_message: str | None = None
    ) -> None:
        self.server_message = server_message
        super().__init__(message, status_code)

    @property
    def is_transport_error(self) -> bool:
        return self.status_code == 0

    @property
    def user_message(self) -> str:
        return self.server_message or self.message
