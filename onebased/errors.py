__all__ = [
    "ArrayShapeError",
    "BaseOneBasedError",
    "BoundsCheckError",
    "EmptyArrayError",
]


class BaseOneBasedError(ValueError):
    """
    Base error which the non-indexing errors of this package are sub-classed from.
    """

    _msg: str = "{}"

    def __init__(self, *args: object) -> None:
        """
        If a single argument is passed, treat it as a pre-formatted message.

        If multiple arguments are passed, they are used as arguments for the template string
        class variable.
        """
        if len(args) == 1:
            super().__init__(args[0])
        else:
            super().__init__(self._msg.format(*args))


class BoundsCheckError(IndexError):
    """
    Raised when an index falls outside the valid range of its dimension.

    The offending index and the dimension it was checked against are kept as attributes, so
    callers can tell a one-based failure (``origin == 1``) from a zero-based one.
    """

    def __init__(self, index: int, dim_len: int, *, origin: int = 0, axis: str = "index") -> None:
        self.index = index
        self.dim_len = dim_len
        self.origin = origin
        self.axis = axis
        super().__init__(
            f"{axis} {index} out of bounds for dimension with length {dim_len}; "
            f"expected range {self.valid_range}"
        )

    @property
    def valid_range(self) -> str:
        if self.origin == 0:
            return f"[0, {self.dim_len})"
        return f"[{self.origin}, {self.dim_len + self.origin - 1}]"


class EmptyArrayError(BaseOneBasedError):
    """Raised when folding an array that has no rows or no columns."""

    _msg = "cannot fold an empty array of shape {!r}"

    def __init__(self, shape: tuple[int, ...]) -> None:
        self.shape = shape
        super().__init__(self._msg.format(shape))


class ArrayShapeError(BaseOneBasedError):
    """Raised when data of the wrong dimensionality is wrapped or indexed."""

    _msg = "expected a {}-dimensional array, got {} dimension(s)"
