import sys
from pathlib import Path
import importlib
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from huffman import HuffmanCode  # noqa: E402

EXAMPLE_SYMBOLS = ["a", "b", "c", "d", "e", "f"]
EXAMPLE_FREQS = [12, 45, 5, 13, 9, 16]


def bits(text: str):
    """Turn ``"TFT"`` into ``[True, False, True]``."""
    return [ch == "T" for ch in text]


@pytest.fixture()
def m():
    """Lazily import the main module for tests to avoid module-level import."""
    return importlib.import_module("main")


@pytest.fixture()
def example_code():
    """Six-letter code with no frequency ties."""
    return HuffmanCode(EXAMPLE_SYMBOLS, EXAMPLE_FREQS)


@pytest.fixture()
def example_args():
    """``-s`` options describing the six-letter alphabet."""
    args = []
    for sym, freq in zip(EXAMPLE_SYMBOLS, EXAMPLE_FREQS):
        args += ["-s", f"{sym}={freq}"]
    return args


@pytest.fixture()
def bits_fn():
    """
    Fixture that provides the bits helper without importing conftest.
    """
    return bits
