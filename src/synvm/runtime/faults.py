''' Machine faults. Any of these aborts the run '''


class MachineFault(Exception):
    cursor: int | None
    opcode: int | None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.cursor = None
        self.opcode = None

    def locate(self, cursor: int, opcode: int | None):
        # Innermost location wins
        if self.cursor is None:
            self.cursor = cursor
            self.opcode = opcode

        return self

    def __str__(self):
        if self.cursor is None:
            return self.message

        return f'{self.message} (cursor {self.cursor}, opcode {self.opcode})'


class InvalidAddress(MachineFault):
    def __init__(self, address: int):
        super().__init__(f'Invalid address {address}')
        self.address = address


class InvalidOperand(MachineFault):
    def __init__(self, operand: int):
        super().__init__(f'Invalid operand {operand}')
        self.operand = operand


class InvalidOpcode(MachineFault):
    def __init__(self, op: int):
        super().__init__(f'Invalid opcode {op}')
        self.op = op


class StackUnderflow(MachineFault):
    def __init__(self):
        super().__init__('Pop from empty stack')


class DivideByZero(MachineFault):
    def __init__(self):
        super().__init__('Modulo by zero')


class IOFailure(MachineFault):
    pass


class ImageError(Exception):
    pass
