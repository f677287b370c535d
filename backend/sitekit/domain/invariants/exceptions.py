class InvariantViolation(Exception):
    """Raised when a write would leave the content model in an invalid state."""
