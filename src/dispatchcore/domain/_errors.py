"""
Shape- and dispatch-related exceptions for dispatchcore.

These errors signal programming-contract violations while a dispatch is being
set up: reading an invalid `Shape`, indexing past its last dimension, or
building a call context on a device that has already been closed. They are
not expected runtime conditions and propagate unmodified to the caller.
"""


class InvalidStateError(RuntimeError):
    """
    Raised when a `Shape` accessor is invoked on an invalid shape.

    Callers that want to avoid this error must check `Shape.valid()` first.

    Attributes
    ----------
    op : str
        The name of the operation that was attempted (e.g., "size").
    """

    def __init__(self, op: str) -> None:
        """
        Initialize the InvalidStateError.

        Parameters
        ----------
        op : str
            The operation that requires a valid shape.
        """
        super().__init__(f"Shape is invalid (attempted '{op}').")
        self.op = op


class IndexOutOfRangeError(IndexError):
    """
    Raised when a dimension index falls outside a shape's dimension count.

    Attributes
    ----------
    index : int
        The index that was requested.
    size : int
        The number of dimensions of the shape.
    """

    def __init__(self, index: int, size: int) -> None:
        super().__init__(
            f"Dimension index {index} out of range for shape with {size} dimension(s)."
        )
        self.index = index
        self.size = size


class DeviceClosedError(RuntimeError):
    """
    Raised when a call context is constructed on a device that has been closed.

    Attributes
    ----------
    device : str
        String representation of the closed device.
    """

    def __init__(self, device: str) -> None:
        super().__init__(f"Device '{device}' is closed.")
        self.device = device
