"""
Service-level exceptions.

Missing or sparse cycle history is not an error: the services report it
with None fields and the ``Unknown`` phase. Exceptions are reserved for
input that cannot be interpreted at all.
"""

class CycleError(Exception):
    """Base exception for cycle calculation errors."""
    pass

class InvalidArgumentError(CycleError, ValueError):
    """Raised when an input, such as a date, cannot be parsed."""
    pass
