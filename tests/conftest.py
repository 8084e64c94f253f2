import os
import sys
from unittest.mock import MagicMock

import pytest

# Add project root to path so the root-level scripts import
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


@pytest.fixture
def spy():
    """A call-counting stand-in for a transform function."""
    def make(func=lambda x: x):
        return MagicMock(side_effect=func)

    return make


@pytest.fixture
def boom():
    """A transform function that always fails."""
    def fail(x):
        raise ValueError(f'cannot transform {x!r}')

    return fail
