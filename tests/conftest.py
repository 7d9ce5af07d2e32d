from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir():
    """Directory holding the sample INI files used across tests."""
    return DATA_DIR
