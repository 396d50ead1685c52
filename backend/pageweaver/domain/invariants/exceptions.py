class InvariantViolation(Exception):
    """Raised when a command would break a document invariant."""
