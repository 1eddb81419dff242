"""Exception types raised or returned by fputil operations."""

__all__ = ["MappingError"]


class MappingError(Exception):
    """A per-element transform failed inside ``map_return_with_error``.

    Attributes:
        index: Zero-based position of the element whose transform failed.
        cause: The exception raised by the transform.
    """

    def __init__(self, index: int, cause: BaseException):
        self.index = index
        self.cause = cause
        super().__init__(f"error mapping at index:'{index}', error: {cause}")
