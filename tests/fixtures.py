# type: ignore
import pytest

import unit_utils


@pytest.fixture
def write_image(tmp_path):
    def write(words, name='challenge.bin'):
        path = tmp_path / name
        path.write_bytes(unit_utils.image(words))
        return path

    yield write
