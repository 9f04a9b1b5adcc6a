import argparse
import logging

from typing import List, Optional

from container.errors import StackEmpty, StackFull
from container.stack import DEFAULT_CAPACITY, BoundedIntStack

SECOND_STACK_CAPACITY = 10
PUSHES = 12
POPS = 5
BANNER = "------------------{} Elements------------------"

logger = logging.getLogger(__name__)


class Lesson:
    """
    Console walkthrough of the stack: fill past capacity, drain a few values,
    copy one stack into another and show that the two no longer share storage.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, pushes: int = PUSHES, pops: int = POPS, echo: bool = False):
        self._capacity = capacity
        self._pushes = pushes
        self._pops = pops
        self._echo = echo
        self._lines: List[str] = []

    def say(self, line: str) -> None:
        self._lines.append(line)
        if self._echo:
            print(line)

    def fill(self, stack: BoundedIntStack, name: str, count: int) -> None:
        for value in range(1, count + 1):
            self.say(f"Pushing {value} to {name}.")
            try:
                stack.push(value)
            except StackFull:
                self.say("Stack is Full")

    def drain(self, stack: BoundedIntStack, name: str, count: int) -> None:
        for _ in range(count):
            try:
                value = stack.pop()
            except StackEmpty:
                self.say("Stack is Empty")
                continue
            self.say(f"Popped {value} from {name}.")

    def show(self, stack: BoundedIntStack, name: str) -> None:
        self.say(BANNER.format(name))
        self.say(stack.render())

    def run(self) -> List[str]:
        self._lines = []

        with BoundedIntStack(self._capacity) as s1, BoundedIntStack(SECOND_STACK_CAPACITY) as s2:
            self.say(f"Live stacks: {BoundedIntStack.instance_count()}")

            self.fill(s1, "s1", self._pushes)
            self.drain(s1, "s1", self._pops)

            s2.assign(s1)
            self.show(s1, "Stack 1")
            self.show(s2, "Stack 2")

            self.say("Pushing 99 to s1 after the copy.")
            try:
                s1.push(99)
            except StackFull:
                self.say("Stack is Full")
            self.show(s1, "Stack 1")
            self.show(s2, "Stack 2")

        self.say(f"Live stacks: {BoundedIntStack.instance_count()}")
        return list(self._lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="stack-lesson",
        description="Walk through pushing, popping and copying a bounded integer stack.",
    )
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY, help="capacity of s1")
    parser.add_argument("--pushes", type=int, default=PUSHES, help="values pushed onto s1")
    parser.add_argument("--pops", type=int, default=POPS, help="values popped from s1")
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug diagnostics")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    try:
        Lesson(args.capacity, args.pushes, args.pops, echo=True).run()
    except ValueError as e:
        logger.error(f"lesson aborted: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
