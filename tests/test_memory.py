import pytest

from synvm.runtime.memory import Memory, decode
from synvm.runtime.faults import InvalidAddress, InvalidOperand, ImageError

from unit_utils import R0, R1, R7


def test_decode():
    assert decode(0) == ('memory', 0)
    assert decode(32767) == ('memory', 32767)
    assert decode(R0) == ('register', 0)
    assert decode(R7) == ('register', 7)


@pytest.mark.parametrize('address', [-1, 32776, 65535])
def test_decode_out_of_range(address):
    with pytest.raises(InvalidAddress):
        decode(address)


def test_registers_and_memory_are_disjoint():
    memory = Memory()

    for address in range(R0, R7 + 1):
        memory.write(address, address)

    assert not any(memory.cells)
    assert memory.registers == tuple(range(R0, R7 + 1))

    memory = Memory()
    memory.write(0, 1)
    memory.write(32767, 2)

    assert memory.registers == (0,) * 8
    assert memory.read(0) == 1
    assert memory.read(32767) == 2


def test_write_is_not_masked():
    memory = Memory()
    memory.write(R1, 40000)
    assert memory.read(R1) == 40000


def test_invalid_access():
    memory = Memory()

    with pytest.raises(InvalidAddress) as e:
        memory.read(32776)

    assert e.value.address == 32776

    with pytest.raises(InvalidAddress):
        memory.write(32776, 0)


def test_resolve():
    memory = Memory()
    memory.write(R7, 99)

    assert memory.resolve(5) == 5
    assert memory.resolve(32767) == 32767
    assert memory.resolve(R0) == 0
    assert memory.resolve(R7) == 99

    with pytest.raises(InvalidOperand) as e:
        memory.resolve(32776)

    assert e.value.operand == 32776


def test_load():
    memory = Memory()
    memory.load((9, 8, 7))

    assert memory.cells[:4] == [9, 8, 7, 0]
    assert memory.registers == (0,) * 8


def test_load_too_large():
    with pytest.raises(ImageError):
        Memory().load([0] * 32769)


def test_fetch_only_from_memory():
    memory = Memory()
    memory.load((19, 65))
    memory.write(R0, 7)

    assert memory.fetch(0) == 19
    assert memory.fetch(1) == 65

    with pytest.raises(InvalidAddress) as e:
        memory.fetch(R0)

    assert e.value.address == R0
