"""Ring and fifo buffer implementations."""
from .fifo_buffer import FifoBuffer
from .ring_buffer import RingBuffer

__all__ = ["FifoBuffer", "RingBuffer"]
