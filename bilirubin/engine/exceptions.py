class CalculationError(Exception):
    """Base exception for all calculator errors."""


class CalculationValidationError(CalculationError):
    """Raised when the engine cannot compute a result from the given input."""


class FormValidationError(CalculationError):
    """Raised when raw form fields are outside the accepted clinical ranges."""
