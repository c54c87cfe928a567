import logging as lg
from typing import Callable

import synvm.common.ops as ops
from synvm.common.hwconf import WORD_MODULUS, WORD_MASK
from synvm.runtime.faults import MachineFault, InvalidOpcode, StackUnderflow, DivideByZero
from synvm.runtime.memory import Memory
from synvm.runtime.stack import Stack
from synvm.runtime.terminal import Terminal
from synvm.runtime.settings import RunSettings


class Halt(Exception):
    ''' Graceful termination, not a fault '''

    def __init__(self, cursor: int, reason: str):
        super().__init__(f'Halted ({reason}) at {cursor}')
        self.cursor = cursor
        self.reason = reason


class CPU():
    ip: int       # Cursor of the next word to fetch
    current: int  # Cursor of the instruction being executed

    def __init__(
        self,
        memory: Memory,
        stack: Stack,
        terminal: Terminal,
        settings: RunSettings | None = None
    ):
        self.memory = memory        # Ref. to memory and registers
        self.stack = stack
        self.terminal = terminal
        self.settings = settings if settings is not None else RunSettings()

        self.ip = 0
        self.current = 0

    # - Helpers - #

    def debug_dump(self):
        state = [f'IP:{self.ip}', f'SP:{len(self.stack)}']
        state.extend([f'{i}:{v:X}' for i, v in enumerate(self.memory.registers)])
        lg.debug(' '.join(state))

    def trace(self, op: int):
        args = [self.memory.read(self.ip + i) for i in range(ops.ARITY.get(op, 0))]
        lg.debug(f'{self.current:5}: {ops.NAMES.get(op, "???")} {" ".join(map(str, args))}')

    def next(self) -> int:
        word = self.memory.fetch(self.ip)
        self.ip += 1
        return word

    def get_next_val(self) -> int:
        return self.memory.resolve(self.next())

    def arithm_pair(self, op: Callable[[int, int], int]):
        dest = self.next()
        b = self.get_next_val()
        c = self.get_next_val()
        self.memory.write(dest, op(b, c))

    # - Operations - #

    def halt(self):
        raise Halt(self.current, 'halt')

    def set(self):
        dest = self.next()
        self.memory.write(dest, self.get_next_val())

    def push(self):
        self.stack.push(self.get_next_val())

    def pop(self):
        dest = self.next()
        self.memory.write(dest, self.stack.pop())

    def eq(self):
        self.arithm_pair(lambda b, c: 1 if b == c else 0)

    def gt(self):
        self.arithm_pair(lambda b, c: 1 if b > c else 0)

    def jmp(self):
        self.ip = self.get_next_val()

    def jt(self):
        val = self.get_next_val()
        addr = self.get_next_val()

        if val != 0:
            self.ip = addr

    def jf(self):
        val = self.get_next_val()
        addr = self.get_next_val()

        if val == 0:
            self.ip = addr

    # - Arithmetic - #

    def add(self):
        self.arithm_pair(lambda b, c: (b + c) % WORD_MODULUS)

    def mult(self):
        self.arithm_pair(lambda b, c: (b * c) % WORD_MODULUS)

    def mod(self):
        dest = self.next()
        b = self.get_next_val()
        c = self.get_next_val()

        if c == 0:
            raise DivideByZero()

        self.memory.write(dest, b % c)

    def band(self):
        self.arithm_pair(lambda b, c: b & c)

    def bor(self):
        self.arithm_pair(lambda b, c: b | c)

    def inv(self):
        dest = self.next()
        self.memory.write(dest, ~self.get_next_val() & WORD_MASK)

    # - Memory - #

    def rmem(self):
        dest = self.next()
        addr = self.get_next_val()
        self.memory.write(dest, self.memory.read(addr))

    def wmem(self):
        addr = self.get_next_val()
        self.memory.write(addr, self.get_next_val())

    # - Calls - #

    def call(self):
        addr = self.get_next_val()
        self.stack.push(self.ip)
        self.ip = addr

    def ret(self):
        try:
            addr = self.stack.pop()
        except StackUnderflow:
            raise Halt(self.current, 'empty stack') from None

        self.ip = addr

    # - Terminal - #

    def out(self):
        self.terminal.send_char(self.get_next_val())

    def inp(self):
        dest = self.next()
        self.memory.write(dest, self.terminal.next_char())

    def noop(self):
        pass

    HANDLERS = {
        ops.HALT: halt,
        ops.SET: set,
        ops.PUSH: push,
        ops.POP: pop,
        ops.EQ: eq,
        ops.GT: gt,
        ops.JMP: jmp,
        ops.JT: jt,
        ops.JF: jf,

        ops.ADD: add,
        ops.MULT: mult,
        ops.MOD: mod,
        ops.AND: band,
        ops.OR: bor,
        ops.NOT: inv,

        ops.RMEM: rmem,
        ops.WMEM: wmem,
        ops.CALL: call,
        ops.RET: ret,

        ops.OUT: out,
        ops.IN: inp,
        ops.NOOP: noop
    }

    # -- Implementation -- #

    def unknown(self, op: int):
        if self.settings.strict_opcodes:
            raise InvalidOpcode(op)

        lg.warning(f'Skipping unknown opcode {op} at {self.current}')

    def exec_next(self):
        self.current = self.ip
        op = None

        try:
            op = self.next()

            if self.settings.trace:
                self.trace(op)

            handler = self.HANDLERS.get(op)

            if handler is None:
                self.unknown(op)
            else:
                handler(self)

        except MachineFault as e:
            e.locate(self.current, op)
            raise

    def run(self):
        while True:
            self.exec_next()
