import logging

from typing import Dict, List, Tuple

from uuid import uuid4

from container.errors import StackClosed
from container.stack import DEFAULT_CAPACITY, BoundedIntStack

MAX_STACKS = 20

logger = logging.getLogger(__name__)


class UnknownStack(KeyError):
    def __init__(self, stack_id: str):
        super().__init__(stack_id)
        self.stack_id = stack_id

    def __str__(self) -> str:
        return f"no stack with id {self.stack_id}"


class RegistryFull(Exception):
    pass


class StackRegistry():
    def __init__(self, max_stacks: int = MAX_STACKS):
        self._stacks: Dict[str, BoundedIntStack] = {}
        self._max_stacks: int = max_stacks

    @property
    def max_stacks(self) -> int:
        return self._max_stacks

    def __len__(self) -> int:
        return len(self._stacks)

    def __contains__(self, stack_id: str) -> bool:
        return stack_id in self._stacks

    def get(self, stack_id: str) -> BoundedIntStack:
        try:
            return self._stacks[stack_id]
        except KeyError:
            raise UnknownStack(stack_id) from None

    def _adopt(self, stack: BoundedIntStack) -> str:
        stack_id = str(uuid4())
        self._stacks[stack_id] = stack
        logger.info(f"Stack {stack_id} created with capacity {stack.capacity}.")
        return stack_id

    def _check_room(self) -> None:
        if len(self._stacks) >= self._max_stacks:
            raise RegistryFull(f"Too many stacks ({self._max_stacks}), release one first.")

    def create(self, capacity: int = DEFAULT_CAPACITY) -> str:
        self._check_room()
        return self._adopt(BoundedIntStack(capacity))

    def copy(self, source_id: str) -> str:
        source = self.get(source_id)
        self._check_room()
        return self._adopt(source.copy())

    def assign(self, target_id: str, source_id: str) -> None:
        self.get(target_id).assign(self.get(source_id))

    def push(self, stack_id: str, value: int) -> None:
        self.get(stack_id).push(value)

    def pop(self, stack_id: str) -> int:
        return self.get(stack_id).pop()

    def peek(self, stack_id: str) -> int:
        return self.get(stack_id).peek()

    def snapshot(self, stack_id: str) -> Tuple[int, ...]:
        return self.get(stack_id).snapshot()

    def render(self, stack_id: str) -> str:
        return self.get(stack_id).render()

    def describe(self, stack_id: str) -> Dict:
        return self._describe(stack_id, self.get(stack_id))

    def _describe(self, stack_id: str, stack: BoundedIntStack) -> Dict:
        return {
            "stack_id": stack_id,
            "capacity": stack.capacity,
            "top": stack.top,
            "elements": list(stack.snapshot()),
        }

    def describe_all(self) -> List[Dict]:
        descriptions = []
        # stacks released while iterating are skipped
        for stack_id, stack in list(self._stacks.items()):
            try:
                descriptions.append(self._describe(stack_id, stack))
            except StackClosed:
                continue
        return descriptions

    def release(self, stack_id: str) -> None:
        if stack_id not in self._stacks:
            raise UnknownStack(stack_id)

        stack = self._stacks.pop(stack_id)
        stack.close()
        logger.info(f"Stack {stack_id} released.")

    def release_all(self) -> None:
        for stack_id in list(self._stacks.keys()):
            self.release(stack_id)

    def ids(self) -> List[str]:
        return list(self._stacks.keys())

    def stats(self) -> Dict[str, int]:
        return {
            "current_stacks": len(self._stacks),
            "total_stacks": self._max_stacks,
            "live_instances": BoundedIntStack.instance_count(),
        }
