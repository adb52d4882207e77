import os
import sys

import pytest

# Modules live flat in CODE/ and import each other by bare name
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "CODE"))

from Rectangles import FreeRect, Item  # noqa: E402


@pytest.fixture
def container():
    """A single 10x20 container at the origin."""
    return FreeRect(10, 20, 0, 0, 1)


@pytest.fixture
def placed_item():
    """A 5x6 item placed at (10, 20) in container 1."""
    item = Item(5, 6)
    item.place(10, 20, 1)
    return item
