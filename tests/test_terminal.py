import io

import pytest

from synvm.runtime.terminal import Terminal
from synvm.runtime.faults import IOFailure


class BrokenStream(io.RawIOBase):
    def readline(self, size=-1):
        raise OSError('device gone')


def test_send_char():
    out = io.BytesIO()
    terminal = Terminal(io.BytesIO(), out)

    terminal.send_char(72)
    terminal.send_char(0x169)

    assert out.getvalue() == b'Hi'


def test_line_is_read_whole():
    instream = io.BytesIO(b'go north\nlook\n')
    terminal = Terminal(instream, io.BytesIO())

    assert terminal.next_char() == ord('g')
    assert instream.tell() == len(b'go north\n')

    line = [terminal.next_char() for _ in range(len('o north\n'))]
    assert bytes(line) == b'o north\n'
    assert instream.tell() == len(b'go north\n')

    assert terminal.next_char() == ord('l')


def test_prompt_before_each_line():
    out = io.BytesIO()
    terminal = Terminal(io.BytesIO(b'a\nb\n'), out, prompt='? ')

    for _ in range(3):
        terminal.next_char()

    assert out.getvalue() == b'? ? '


def test_exhausted():
    terminal = Terminal(io.BytesIO(b''), io.BytesIO())

    with pytest.raises(IOFailure):
        terminal.next_char()


def test_read_failure():
    terminal = Terminal(BrokenStream(), io.BytesIO())

    with pytest.raises(IOFailure) as e:
        terminal.next_char()

    assert 'device gone' in str(e.value)
