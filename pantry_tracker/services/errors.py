"""Errors raised by the pantry service layer."""


class PantryError(Exception):
    """Base class for pantry errors; ``message`` is safe to show to users."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthorized(PantryError):
    """No valid caller identity."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class InvalidInput(PantryError):
    """A request field failed validation."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class NotFound(PantryError):
    """Target entry is missing, inactive, or owned by someone else."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class ValidationError(PantryError):
    """The store refused a write that breaks an entry invariant."""
