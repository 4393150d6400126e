"""Exceptions raised by sheetutils."""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument that violates a function's contract."""
    pass
