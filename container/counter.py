from threading import Lock


class InstanceCounter:
    def __init__(self):
        self._contains = 0
        self._lock = Lock()

    def increment(self) -> int:
        with self._lock:
            self._contains += 1
            return self._contains

    def decrement(self) -> int:
        with self._lock:
            if self._contains == 0:
                raise RuntimeError("instance counter would drop below zero")
            self._contains -= 1
            return self._contains

    def get(self) -> int:
        return self._contains
