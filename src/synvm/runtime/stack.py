from synvm.runtime.faults import StackUnderflow


class Stack():
    def __init__(self):
        self.items: list[int] = []

    def __len__(self):
        return len(self.items)

    def push(self, val: int):
        self.items.append(val)

    def pop(self) -> int:
        if not self.items:
            raise StackUnderflow()

        return self.items.pop()
