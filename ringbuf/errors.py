"""Exceptions raised by ring and fifo buffers."""


class RingBufError(Exception):
    """Base class for all buffer failures."""


class NotAllocatedError(RingBufError, RuntimeError):
    """Operation attempted on a buffer with no storage."""

    def __init__(self, buffer: str, operation: str):
        self.buffer = buffer
        self.operation = operation
        super().__init__(f"{buffer}.{operation}: buffer is not allocated")


class InvalidCapacityError(RingBufError, ValueError):
    """Requested capacity is not an integer >= 2."""

    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"capacity must be an integer >= 2, got {capacity!r}")


class PositionOutOfRangeError(RingBufError, IndexError):
    """Lookback position outside [0, capacity - 1]."""

    def __init__(self, position, capacity: int):
        self.position = position
        self.capacity = capacity
        super().__init__(
            f"position must be in [0, {capacity - 1}], got {position!r}"
        )


class CapacityBoundaryError(RingBufError):
    """Routine full/empty condition. Never logged."""


class BufferFullError(CapacityBoundaryError):
    """Push on a fifo buffer holding `capacity` unread elements."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"fifo buffer is full ({capacity}/{capacity})")


class BufferEmptyError(CapacityBoundaryError):
    """Pop on a fifo buffer with no unread elements."""

    def __init__(self):
        super().__init__("fifo buffer is empty")
