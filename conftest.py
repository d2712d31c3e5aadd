import shutil
from pathlib import Path

import pytest

from aidchaos import storage

TEST_DATA_DIR = Path("data-tests")


@pytest.fixture(autouse=True)
def clean_test_data():
    """Wipe and re-init data-tests/ before every test."""
    if TEST_DATA_DIR.exists():
        shutil.rmtree(TEST_DATA_DIR)
    storage.init_storage(TEST_DATA_DIR)
    yield
    # leave data-tests around after tests for inspection; CI can ignore it


class StubRandom:
    """Deterministic stand-in for random.Random; counts randint calls."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randint(self, a, b):
        self.calls += 1
        return self.values.pop(0)


@pytest.fixture
def stub_random():
    """Factory: stub_random(10, 99) yields those rolls in order."""
    return lambda *values: StubRandom(values)
