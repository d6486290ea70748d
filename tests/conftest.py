"""Pytest fixtures for minigrep tests."""

import tempfile
from pathlib import Path

import pytest

POEM = """\
I'm nobody! Who are you?
Are you nobody, too?
Then there's a pair of us - don't tell!
They'd banish us, you know.

How dreary to be somebody!
How public, like a frog
To tell your name the livelong day
To an admiring bog!
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_contents():
    """Short text used by the search examples."""
    return "Rust:\nsafe, fast, productive.\nPick three.\nTrust me"


@pytest.fixture
def poem_file(temp_dir):
    """Write a small poem to disk and return its path."""
    path = temp_dir / "poem.txt"
    path.write_text(POEM, encoding="utf-8")
    return path
