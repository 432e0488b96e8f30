"""
Domain errors for the bookshelf.
"""


class UnsupportedOperationError(TypeError):
    """Raised when a caller tries to mutate a read-only book sequence."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Book list is read-only: '{operation}' is not supported")
