# app/core/exceptions.py

class BaseAppException(Exception):
    """Base class for every application exception."""
    def __init__(self, message: str = "App exception"):
        super().__init__(message)

# ==== Validation ====

class ValidationError(BaseAppException):
    """Boundary input was rejected."""
    def __init__(self, message: str = "Validation error"):
        super().__init__(message)

# ==== NotFound ====

class NotFoundError(BaseAppException):
    """A resource looked up by id does not exist."""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)

class TeamNotFound(NotFoundError):
    def __init__(self, message: str = "Team not found"):
        super().__init__(message)

class UserNotFound(NotFoundError):
    def __init__(self, message: str = "User not found"):
        super().__init__(message)

class TaskNotFound(NotFoundError):
    def __init__(self, message: str = "Task not found"):
        super().__init__(message)

# ==== Persistence ====

class StoreError(BaseAppException):
    """The persisted document could not be written."""
    def __init__(self, message: str = "Store error"):
        super().__init__(message)
