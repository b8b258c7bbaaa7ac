"""Fixed-size fifo buffer with push/pop queue semantics."""
from typing import Callable, Generic, List, Optional, TypeVar

import structlog

from ..errors import BufferEmptyError, BufferFullError, InvalidCapacityError, NotAllocatedError

logger = structlog.get_logger()

T = TypeVar('T')


class FifoBuffer(Generic[T]):
    """Fixed-capacity queue that pops the oldest unread value.

    Unread values occupy the span [head, head + count) modulo capacity.
    Pushing when full or popping when empty raises a CapacityBoundaryError
    subclass without logging anything, so callers may treat those as normal
    branches or poll available() first.

    Not thread-safe.
    """

    def __init__(self, default_factory: Callable[[], T] = int):
        """Create an empty buffer with no storage.

        Args:
            default_factory: Produces the zero value used to fill slots on
                allocate and reset
        """
        self.default_factory = default_factory
        self._data: Optional[List[T]] = None
        self._capacity = 0
        self._head = 0
        self._count = 0

    @classmethod
    def empty(cls, default_factory: Callable[[], T] = int) -> "FifoBuffer[T]":
        """Return a buffer with no storage, ready for allocate()."""
        return cls(default_factory)

    @classmethod
    def allocated(cls, capacity: int, default_factory: Callable[[], T] = int) -> "FifoBuffer[T]":
        """Return a new buffer already allocated to capacity."""
        buf = cls(default_factory)
        buf.allocate(capacity)
        return buf

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def head(self) -> int:
        """Index of the next value to be popped."""
        return self._head

    @property
    def is_allocated(self) -> bool:
        return self._data is not None

    @property
    def is_empty(self) -> bool:
        return self._data is not None and self._count == 0

    @property
    def is_full(self) -> bool:
        return self._data is not None and self._count == self._capacity

    def allocate(self, capacity: int) -> None:
        """Allocate zero-filled storage for capacity values.

        If the buffer is already allocated at this capacity it is left
        untouched, unread values included. Otherwise existing contents are
        discarded.

        Args:
            capacity: Number of slots, must be >= 2

        Raises:
            InvalidCapacityError: If capacity is not an integer >= 2
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 2:
            logger.error("fifo_buffer_invalid_capacity", capacity=capacity)
            raise InvalidCapacityError(capacity)

        if self._data is not None and self._capacity == capacity:
            return

        self._data = [self.default_factory() for _ in range(capacity)]
        self._capacity = capacity
        self._head = 0
        self._count = 0

    def release(self) -> None:
        """Drop storage and return to the empty state. Safe to call repeatedly."""
        self._data = None
        self._capacity = 0
        self._head = 0
        self._count = 0

    def reset(self) -> None:
        """Discard unread values and zero every slot.

        Raises:
            NotAllocatedError: If the buffer has no storage
        """
        data = self._require_data("reset")
        for i in range(self._capacity):
            data[i] = self.default_factory()
        self._head = 0
        self._count = 0

    def available(self) -> int:
        """Return the number of values waiting to be popped.

        Raises:
            NotAllocatedError: If the buffer has no storage
        """
        self._require_data("available")
        return self._count

    def push(self, value: T) -> None:
        """Append value behind the newest unread entry.

        Args:
            value: Value to enqueue

        Raises:
            NotAllocatedError: If the buffer has no storage
            BufferFullError: If capacity values are already waiting
        """
        data = self._require_data("push")

        # Full is an expected condition, stay quiet
        if self._count == self._capacity:
            raise BufferFullError(self._capacity)

        data[(self._head + self._count) % self._capacity] = value
        self._count += 1

    def pop(self) -> T:
        """Remove and return the oldest unread value.

        Returns:
            The value at head

        Raises:
            NotAllocatedError: If the buffer has no storage
            BufferEmptyError: If nothing is waiting
        """
        data = self._require_data("pop")

        # Empty is an expected condition, stay quiet
        if self._count == 0:
            raise BufferEmptyError()

        value = data[self._head]
        self._count -= 1
        self._head = (self._head + 1) % self._capacity
        return value

    def drain(self) -> List[T]:
        """Pop every unread value.

        Returns:
            Values oldest first, empty if nothing was waiting

        Raises:
            NotAllocatedError: If the buffer has no storage
        """
        self._require_data("drain")
        out: List[T] = []
        while self._count:
            out.append(self.pop())
        return out

    def _require_data(self, operation: str) -> List[T]:
        if self._data is None:
            logger.error("fifo_buffer_not_allocated", operation=operation)
            raise NotAllocatedError("FifoBuffer", operation)
        return self._data

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        if self._data is None:
            return "FifoBuffer(unallocated)"
        return f"FifoBuffer(available={self._count}/{self._capacity}, head={self._head})"
