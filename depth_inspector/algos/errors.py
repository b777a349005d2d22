"""Exceptions raised by the inspection algorithms."""


class PreconditionError(ValueError):
    """Raised when an algorithm is called with arguments outside its input domain.

    This signals a programming error in the caller (a negative radius, an empty depth
    buffer, ...). Nothing at runtime is expected to raise it.
    """
