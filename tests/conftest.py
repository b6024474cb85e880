import sys, os

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from ecs.logging_setup import configure_logging
from tests.helpers import ScriptedRandom, capture, fill_grid

__all__ = [
    "ScriptedRandom",
    "capture",
    "fill_grid",
]


@pytest.fixture(autouse=True)
def quiet_logging():
    # Route structlog to the per-test stderr capture at WARNING so systems stay silent.
    configure_logging(level="WARNING")
    yield
