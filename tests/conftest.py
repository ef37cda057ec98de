import sys
from pathlib import Path

import pytest

# Ensure the 'src' directory is on sys.path for imports in tests
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


BASIC = ["123", "true", "hello world", "!@#$%"]
FRUIT = [
    "apple", "banana", "cherry", "date", "elderberry",
    "fig", "grape", "honeydew", "kiwi", "lemon",
    "mango", "nectarine", "orange", "pear", "quince",
    "raspberry", "strawberry", "tangerine", "watermelon", "zucchini",
]


@pytest.fixture
def basic_data():
    return list(BASIC)


@pytest.fixture
def odd_data():
    return ["123", "true", "hello world"]


@pytest.fixture
def fruit_data():
    return list(FRUIT)
