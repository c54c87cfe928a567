import pytest

from synvm.runtime.stack import Stack
from synvm.runtime.faults import StackUnderflow


def test_push_pop():
    stack = Stack()
    stack.push(1)
    depth = len(stack)

    stack.push(32767)
    assert stack.pop() == 32767
    assert len(stack) == depth
    assert stack.pop() == 1


def test_underflow():
    stack = Stack()

    with pytest.raises(StackUnderflow):
        stack.pop()

    stack.push(3)
    stack.pop()

    with pytest.raises(StackUnderflow):
        stack.pop()
