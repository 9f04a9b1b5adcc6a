class StackError(Exception):
    pass


class StackFull(StackError, OverflowError):
    def __init__(self, capacity: int):
        super().__init__(f"Stack is Full (capacity {capacity})")
        self.capacity = capacity


class StackEmpty(StackError, IndexError):
    def __init__(self):
        super().__init__("Stack is Empty")


class InvalidCapacity(StackError, ValueError):
    def __init__(self, capacity):
        super().__init__(f"capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity


class StackClosed(StackError):
    pass


class BufferReleased(StackError):
    pass
