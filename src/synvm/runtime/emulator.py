import sys
from pathlib import Path
import logging as lg
import traceback
from typing import BinaryIO, Sequence

import click

from synvm.runtime.faults import MachineFault, IOFailure, ImageError
from synvm.runtime.memory import Memory
from synvm.runtime.stack import Stack
from synvm.runtime.terminal import Terminal
from synvm.runtime.settings import RunSettings
import synvm.runtime.loader as loader
import synvm.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_IMAGE_ERROR = 2
EXIT_KEYBOARD = 3
EXIT_IO_FAILURE = 4
EXIT_MACHINE_FAULT = 5
EXIT_EXEC_ERROR = 100


def create_cpu(
    words: Sequence[int],
    instream: BinaryIO,
    outstream: BinaryIO,
    settings: RunSettings | None = None
) -> cpu.CPU:
    settings = settings if settings is not None else RunSettings()

    memory = Memory()
    memory.load(words)
    terminal = Terminal(instream, outstream, prompt=settings.prompt)

    return cpu.CPU(memory, Stack(), terminal, settings)


def execute(
    words: Sequence[int],
    instream: BinaryIO,
    outstream: BinaryIO,
    settings: RunSettings | None = None
):
    ''' Runs a program until it halts (raises cpu.Halt) or faults (raises MachineFault) '''

    proc = create_cpu(words, instream, outstream, settings)

    try:
        proc.run()
    finally:
        proc.debug_dump()


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--trace', is_flag=True, help='Log every executed instruction')
@click.option('--strict', is_flag=True, help='Fail on unknown opcodes instead of skipping them')
@click.option('--prompt', type=str, default=None, help='Text written before every line of input')
@click.argument('image_filename', type=Path, default=Path('challenge.bin'))
def run(verbose: bool, trace: bool, strict: bool, prompt: str | None, image_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose or trace else lg.INFO)
    lg.info("SYNVM")

    settings = RunSettings().update(trace=trace, strict_opcodes=strict, prompt=prompt)

    try:
        words = loader.read_image(image_filename)
        lg.info(f'Loaded {len(words)} words from {image_filename}')

        execute(
            words,
            sys.stdin.buffer,
            sys.stdout.buffer,
            settings
        )

    except cpu.Halt as e:
        if e.reason == 'empty stack':
            lg.info(f'Exiting from empty stack at {e.cursor}')
        else:
            lg.info(f'Exiting at {e.cursor}')

        sys.exit(EXIT_HALT)

    except ImageError as e:
        lg.error(f'Cannot load image: {e}')
        sys.exit(EXIT_IMAGE_ERROR)

    except IOFailure as e:
        lg.error(f'Execution halted on input failure: {e}')
        sys.exit(EXIT_IO_FAILURE)

    except MachineFault as e:
        lg.error(f'Execution halted on machine fault: {e}')
        sys.exit(EXIT_MACHINE_FAULT)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
