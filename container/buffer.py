from typing import List, Optional, Tuple

from container.errors import BufferReleased


class IntBuffer:
    """Fixed-size integer storage owned by exactly one stack."""

    def __init__(self, size: int):
        self._size = size
        self._contains: Optional[List[int]] = [0 for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    @property
    def released(self) -> bool:
        return self._contains is None

    def _storage(self) -> List[int]:
        if self._contains is None:
            raise BufferReleased("buffer has already been released")
        return self._contains

    def get(self, index: int) -> int:
        if not 0 <= index < self._size:
            raise IndexError(f"buffer index {index} out of range 0..{self._size - 1}")
        return self._storage()[index]

    def set(self, index: int, value: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"buffer index {index} out of range 0..{self._size - 1}")
        self._storage()[index] = value

    def view(self, count: int) -> Tuple[int, ...]:
        return tuple(self._storage()[:count])

    def reallocate(self, size: int) -> None:
        # old storage goes first, then the new block is acquired
        self.release()
        self._size = size
        self._contains = [0 for _ in range(size)]

    def release(self) -> None:
        self._storage()
        self._contains = None
