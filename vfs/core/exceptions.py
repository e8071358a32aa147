# vfs/core/exceptions.py

class AppError(Exception):
    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


class ValidationError(AppError):
    def __init__(self, message: str = "Invalid request") -> None:
        super().__init__(message, status_code=400)


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=404)


class PayloadTooLargeError(AppError):
    def __init__(self, message: str = "Payload too large") -> None:
        super().__init__(message, status_code=413)


class StorageError(AppError):
    """Filesystem failure: disk full, permission denied, stat/write/rename errors."""

    def __init__(self, message: str = "Storage failure") -> None:
        super().__init__(message, status_code=500)


class PersistenceError(AppError):
    """Repository failure while looking up folders or allocating/inserting files."""

    def __init__(self, message: str = "Persistence failure") -> None:
        super().__init__(message, status_code=500)
