import pytest

from dicephrase.core.wordlist import MapWordlist


@pytest.fixture
def test_wordlist():
    return MapWordlist(1, 6, {1: "test", 2: "testing", 3: "tests"})


@pytest.fixture
def uniform_wordlist():
    """Single d6 roll where every face maps to 'test'."""
    return MapWordlist(1, 6, {face: "test" for face in range(1, 7)})
