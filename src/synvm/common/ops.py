# Control
HALT = 0x00  # stop
SET = 0x01   # B -> A
PUSH = 0x02  # A -> [SP++]
POP = 0x03   # [--SP] -> A
EQ = 0x04    # B .eq C -> A
GT = 0x05    # B .gt C -> A
JMP = 0x06   # goto A
JT = 0x07    # if A .ne 0 jmp B
JF = 0x08    # if A .eq 0 jmp B

# Arithmetic
ADD = 0x09   # B +  C -> A
MULT = 0x0A  # B *  C -> A
MOD = 0x0B   # B %  C -> A
AND = 0x0C   # B &  C -> A
OR = 0x0D    # B |  C -> A
NOT = 0x0E   # ~B -> A

# Memory
RMEM = 0x0F  # M[B] -> A
WMEM = 0x10  # B -> M[A]

# Calls
CALL = 0x11  # push IP + 2; jmp A
RET = 0x12   # jmp [--SP]

# Terminal
OUT = 0x13   # A -> stdout
IN = 0x14    # stdin -> A
NOOP = 0x15

ARITY = {
    HALT: 0,
    SET: 2,
    PUSH: 1,
    POP: 1,
    EQ: 3,
    GT: 3,
    JMP: 1,
    JT: 2,
    JF: 2,
    ADD: 3,
    MULT: 3,
    MOD: 3,
    AND: 3,
    OR: 3,
    NOT: 2,
    RMEM: 2,
    WMEM: 2,
    CALL: 1,
    RET: 0,
    OUT: 1,
    IN: 1,
    NOOP: 0
}

NAMES = {
    HALT: 'halt',
    SET: 'set',
    PUSH: 'push',
    POP: 'pop',
    EQ: 'eq',
    GT: 'gt',
    JMP: 'jmp',
    JT: 'jt',
    JF: 'jf',
    ADD: 'add',
    MULT: 'mult',
    MOD: 'mod',
    AND: 'and',
    OR: 'or',
    NOT: 'not',
    RMEM: 'rmem',
    WMEM: 'wmem',
    CALL: 'call',
    RET: 'ret',
    OUT: 'out',
    IN: 'in',
    NOOP: 'noop'
}
