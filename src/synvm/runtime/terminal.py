import logging as lg
from collections import deque
from typing import BinaryIO

from synvm.common.hwconf import CHAR_MASK
from synvm.runtime.faults import IOFailure


class Terminal():
    ''' Character I/O of the machine.

    Output is written byte by byte and flushed at once. Input is read a whole
    line at a time; the line's bytes are then handed out one per request, and
    the stream is not touched again until they are all consumed.
    '''

    def __init__(self, instream: BinaryIO, outstream: BinaryIO, prompt: str | None = None):
        self.instream = instream
        self.outstream = outstream
        self.prompt = prompt
        self.pending: deque[int] = deque()

    def send_char(self, val: int):
        self.outstream.write(bytes([val & CHAR_MASK]))
        self.outstream.flush()

    def read_line(self):
        if self.prompt:
            self.outstream.write(self.prompt.encode())
            self.outstream.flush()

        try:
            line = self.instream.readline()
        except OSError as e:
            raise IOFailure(f'Input failed: {e}') from e

        if not line:
            raise IOFailure('Input exhausted')

        lg.debug(f'Input line of {len(line)} chars')
        self.pending.extend(line)

    def next_char(self) -> int:
        if not self.pending:
            self.read_line()

        return self.pending.popleft()
