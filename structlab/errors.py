# structlab/errors.py
"""Named error kinds raised by the solvers when an input is outside its domain."""


class StructLabError(ValueError):
    """Base class for all engine input errors."""
    pass


class InvalidGeometry(StructLabError):
    """Raised for non-positive or degenerate lengths, depths and thicknesses."""
    pass


class InvalidRange(StructLabError):
    """Raised when a ratio, position or material/load value is outside its defined domain."""
    pass


class DivisionByZero(StructLabError, ZeroDivisionError):
    """Raised when a ratio is requested against a zero applied load."""
    pass


def require_positive(name: str, value: float, error=InvalidGeometry) -> float:
    """Return value as float, or raise `error` unless it is finite and > 0."""
    value = float(value)
    if not (value > 0.0) or value == float('inf'):
        raise error(f"{name} must be positive, got {value}")
    return value


def require_non_negative(name: str, value: float, error=InvalidRange) -> float:
    """Return value as float, or raise `error` unless it is finite and >= 0."""
    value = float(value)
    if not (value >= 0.0) or value == float('inf'):
        raise error(f"{name} must be non-negative, got {value}")
    return value


def require_in_range(name: str, value: float, low: float, high: float) -> float:
    """Return value as float, or raise InvalidRange unless low <= value <= high."""
    value = float(value)
    if not (low <= value <= high):
        raise InvalidRange(f"{name} must lie in [{low}, {high}], got {value}")
    return value
