"""Fixed-size ring buffer with lookback by position."""
from typing import Callable, Generic, List, Optional, TypeVar

import structlog

from ..errors import InvalidCapacityError, NotAllocatedError, PositionOutOfRangeError

logger = structlog.get_logger()

T = TypeVar('T')


def _check_capacity(capacity) -> None:
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 2:
        logger.error("ring_buffer_invalid_capacity", capacity=capacity)
        raise InvalidCapacityError(capacity)


class RingBuffer(Generic[T]):
    """Fixed-size circular buffer that overwrites its oldest value.

    Position 0 is always the most recently inserted value and position
    ``capacity - 1`` the oldest one still retained. Every slot holds data from
    the moment of allocation; untouched slots read as the zero value produced
    by ``default_factory``. Suited to keeping the last N samples of a discrete
    time filter.

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
        self._cursor = 0

    @classmethod
    def empty(cls, default_factory: Callable[[], T] = int) -> "RingBuffer[T]":
        """Return a buffer with no storage, ready for allocate()."""
        return cls(default_factory)

    @classmethod
    def allocated(cls, capacity: int, default_factory: Callable[[], T] = int) -> "RingBuffer[T]":
        """Return a new buffer already allocated to capacity."""
        buf = cls(default_factory)
        buf.allocate(capacity)
        return buf

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def cursor(self) -> int:
        """Index of the most recently inserted value."""
        return self._cursor

    @property
    def is_allocated(self) -> bool:
        return self._data is not None

    def allocate(self, capacity: int) -> None:
        """Allocate zero-filled storage for capacity values.

        If the buffer is already allocated at this capacity it is left
        untouched. Otherwise existing contents are discarded.

        Args:
            capacity: Number of slots, must be >= 2

        Raises:
            InvalidCapacityError: If capacity is not an integer >= 2
        """
        _check_capacity(capacity)

        if self._data is not None and self._capacity == capacity:
            return

        self._data = [self.default_factory() for _ in range(capacity)]
        self._capacity = capacity
        self._cursor = 0

    def release(self) -> None:
        """Drop storage and return to the empty state. Safe to call repeatedly."""
        self._data = None
        self._capacity = 0
        self._cursor = 0

    def reset(self) -> None:
        """Set every slot back to the zero value and the cursor to 0.

        Raises:
            NotAllocatedError: If the buffer has no storage
        """
        data = self._require_data("reset")
        for i in range(self._capacity):
            data[i] = self.default_factory()
        self._cursor = 0

    def insert(self, value: T) -> None:
        """Write value as the newest entry, evicting the oldest.

        Args:
            value: Value to insert

        Raises:
            NotAllocatedError: If the buffer has no storage
        """
        data = self._require_data("insert")
        self._cursor = (self._cursor + 1) % self._capacity
        data[self._cursor] = value

    def get(self, position: int) -> T:
        """Fetch the value 'position' steps behind the latest insertion.

        Args:
            position: Steps back, 0 for the newest value, capacity - 1 for the
                oldest

        Returns:
            The stored value

        Raises:
            NotAllocatedError: If the buffer has no storage
            PositionOutOfRangeError: If position is outside [0, capacity - 1]
        """
        data = self._require_data("get")
        if (
            isinstance(position, bool)
            or not isinstance(position, int)
            or position < 0
            or position >= self._capacity
        ):
            logger.error(
                "ring_buffer_position_out_of_range",
                position=position,
                capacity=self._capacity,
            )
            raise PositionOutOfRangeError(position, self._capacity)

        return data[(self._cursor - position) % self._capacity]

    def history(self) -> List[T]:
        """Return all values, newest first.

        Returns:
            List of length capacity, equivalent to get(0) .. get(capacity - 1)

        Raises:
            NotAllocatedError: If the buffer has no storage
        """
        data = self._require_data("history")
        return [data[(self._cursor - i) % self._capacity] for i in range(self._capacity)]

    def _require_data(self, operation: str) -> List[T]:
        if self._data is None:
            logger.error("ring_buffer_not_allocated", operation=operation)
            raise NotAllocatedError("RingBuffer", operation)
        return self._data

    def __len__(self) -> int:
        return self._capacity

    def __repr__(self) -> str:
        if self._data is None:
            return "RingBuffer(unallocated)"
        return f"RingBuffer(capacity={self._capacity}, cursor={self._cursor})"
