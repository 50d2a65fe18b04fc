import os
import sys

import pytest

# Make the src/ layout importable without installing the package
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)


@pytest.fixture
def election():
    """An in-memory election with one registered voter who has not voted."""
    from ballotbox.election import Election
    from ballotbox.storage import MemoryStore

    e = Election(MemoryStore())
    e.register("Ali Omar Hassan", 25, "male", "25261112233", "Hodan")
    return e
