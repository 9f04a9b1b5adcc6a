import logging
import weakref

from typing import Tuple

from container.buffer import IntBuffer
from container.counter import InstanceCounter
from container.errors import InvalidCapacity, StackClosed, StackEmpty, StackFull

DEFAULT_CAPACITY = 10

logger = logging.getLogger(__name__)

_live_instances = InstanceCounter()


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _destroy(buffer: IntBuffer) -> None:
    # a failed reallocation can leave the buffer already released
    try:
        if not buffer.released:
            buffer.release()
    finally:
        _live_instances.decrement()


class BoundedIntStack:
    """
    Fixed-capacity LIFO stack of integers backed by an owned IntBuffer.

    Every live instance is counted in a process-wide counter. The buffer is
    released and the counter decremented exactly once, by whichever comes
    first: close(), leaving a with-block, or garbage collection.
    Copies (copy(), assign(), copy.copy, copy.deepcopy) never share storage.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if not _is_int(capacity) or capacity <= 0:
            raise InvalidCapacity(capacity)

        self._capacity = capacity
        self._top = -1
        self._buffer = IntBuffer(capacity)
        _live_instances.increment()
        self._finalizer = weakref.finalize(self, _destroy, self._buffer)

    @staticmethod
    def instance_count() -> int:
        return _live_instances.get()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def top(self) -> int:
        return self._top

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def _check_open(self) -> None:
        if self.closed:
            raise StackClosed("operation on a closed stack")

    def __len__(self) -> int:
        self._check_open()
        return self._top + 1

    def is_empty(self) -> bool:
        self._check_open()
        return self._top == -1

    def is_full(self) -> bool:
        self._check_open()
        return self._top + 1 == self._capacity

    def push(self, value: int) -> None:
        self._check_open()
        if not _is_int(value):
            raise TypeError(f"only integers can be pushed, got {type(value).__name__}")

        if self._top + 1 < self._capacity:
            self._buffer.set(self._top + 1, value)
            self._top += 1
        else:
            logger.debug("Stack is Full")
            raise StackFull(self._capacity)

    def pop(self) -> int:
        self._check_open()
        if self._top >= 0:
            value = self._buffer.get(self._top)
            self._top -= 1
            return value

        logger.debug("Stack is Empty")
        raise StackEmpty()

    def peek(self) -> int:
        self._check_open()
        if self._top >= 0:
            return self._buffer.get(self._top)
        raise StackEmpty()

    def snapshot(self) -> Tuple[int, ...]:
        """Stored elements from bottom to top."""
        self._check_open()
        return self._buffer.view(self._top + 1)

    def render(self) -> str:
        self._check_open()
        if self.is_empty():
            return "Stack is Empty"
        return "Stack elements: " + " ".join(str(value) for value in self.snapshot())

    def copy(self) -> "BoundedIntStack":
        self._check_open()
        clone = BoundedIntStack(self._capacity)
        clone.assign(self)
        return clone

    def assign(self, other: "BoundedIntStack") -> "BoundedIntStack":
        self._check_open()
        if other is self:
            return self

        other._check_open()

        self._buffer.reallocate(other._capacity)
        self._capacity = other._capacity
        for index in range(other._top + 1):
            self._buffer.set(index, other._buffer.get(index))
        self._top = other._top
        return self

    def __copy__(self) -> "BoundedIntStack":
        return self.copy()

    def __deepcopy__(self, memo) -> "BoundedIntStack":
        return self.copy()

    def close(self) -> None:
        self._finalizer()

    def __enter__(self) -> "BoundedIntStack":
        self._check_open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        if self.closed:
            return f"BoundedIntStack(capacity={self._capacity}, closed)"
        return f"BoundedIntStack(capacity={self._capacity}, elements={list(self.snapshot())})"
