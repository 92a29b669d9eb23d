from pathlib import Path
from typing import Iterator

import logging

import pytest


@pytest.fixture
def modules_txt(shared_datadir: Path) -> Path:
    return shared_datadir / 'modules.txt'


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    # main() reconfigures the root logger on every call.
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
