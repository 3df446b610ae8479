"""Domain-specific exceptions for the budget tracker core."""


class ValidationError(ValueError):
    """Raised when provided data does not meet validation requirements."""


class NotANumberError(ValidationError):
    """Raised when numeric input cannot be parsed."""


class OutOfRangeError(ValidationError):
    """Raised when a parsed number falls outside the accepted range."""


class EmptyFieldError(ValidationError):
    """Raised when a required text field is blank."""
