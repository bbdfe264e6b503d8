"""Domain-level exceptions."""


class InputValidationError(ValueError):
    """Raised when raw console input cannot be parsed into a valid value."""
