"""Fixed-capacity ring and fifo buffers for retaining the last N values of a stream."""
from .buffers import FifoBuffer, RingBuffer
from .errors import (
    BufferEmptyError,
    BufferFullError,
    CapacityBoundaryError,
    InvalidCapacityError,
    NotAllocatedError,
    PositionOutOfRangeError,
    RingBufError,
)

__all__ = [
    "BufferEmptyError",
    "BufferFullError",
    "CapacityBoundaryError",
    "FifoBuffer",
    "InvalidCapacityError",
    "NotAllocatedError",
    "PositionOutOfRangeError",
    "RingBufError",
    "RingBuffer",
]
