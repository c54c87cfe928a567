import struct
import logging as lg
from pathlib import Path

from synvm.common.hwconf import WORD_SIZE, MEMORY_SIZE
from synvm.runtime.faults import ImageError


def decode_image(image: bytes) -> tuple[int, ...]:
    ''' Little-endian 16-bit words, no header '''

    if len(image) % WORD_SIZE != 0:
        raise ImageError(f'Image length {len(image)} is not a multiple of {WORD_SIZE}')

    count = len(image) // WORD_SIZE

    if count > MEMORY_SIZE:
        raise ImageError(f'Image of {count} words does not fit into memory')

    return struct.unpack(f'<{count}H', image)


def read_image(path: Path) -> tuple[int, ...]:
    lg.debug(f'Reading image {path}')

    try:
        image = path.read_bytes()
    except OSError as e:
        raise ImageError(f'Cannot read image {path}: {e.strerror}') from e

    return decode_image(image)
