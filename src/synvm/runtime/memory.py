import logging as lg
from typing import Literal, Sequence

from synvm.common.hwconf import MEMORY_SIZE, REGISTER_COUNT, REGISTER_BASE, MAX_ADDRESS
from synvm.runtime.faults import InvalidAddress, InvalidOperand, ImageError

Store = Literal['memory', 'register']


def decode(address: int) -> tuple[Store, int]:
    ''' Splits a unified address into a store and an index within it '''

    if 0 <= address < REGISTER_BASE:
        return ('memory', address)

    if REGISTER_BASE <= address <= MAX_ADDRESS:
        return ('register', address - REGISTER_BASE)

    raise InvalidAddress(address)


class Memory():
    def __init__(self):
        self.cells = [0] * MEMORY_SIZE
        self.gp = [0] * REGISTER_COUNT

    def store(self, kind: Store) -> list[int]:
        return self.cells if kind == 'memory' else self.gp

    def read(self, address: int) -> int:
        kind, index = decode(address)
        return self.store(kind)[index]

    def fetch(self, address: int) -> int:
        kind, index = decode(address)

        # Registers are addressable, but never executable
        if kind != 'memory':
            raise InvalidAddress(address)

        return self.cells[index]

    def write(self, address: int, value: int):
        kind, index = decode(address)
        self.store(kind)[index] = value

    def resolve(self, word: int) -> int:
        ''' Value of an operand: literal below the register range, register contents within it '''

        try:
            kind, index = decode(word)
        except InvalidAddress:
            raise InvalidOperand(word) from None

        if kind == 'memory':
            return word

        return self.gp[index]

    def load(self, words: Sequence[int]):
        if len(words) > MEMORY_SIZE:
            raise ImageError(f'Image of {len(words)} words does not fit into memory')

        self.cells[0:len(words)] = words
        lg.debug(f'Loaded {len(words)} words')

    @property
    def registers(self) -> tuple[int, ...]:
        return tuple(self.gp)
