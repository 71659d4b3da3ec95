"""
Shared test fixtures and path constants for monkey-parse tests.

All input file paths are defined here as module-level constants for
easy discovery and modification. If input files move or new ones are
added, update this file.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Input file paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
DATA_DIR = Path(__file__).resolve().parent / "data"

SAMPLE_TXT = DATA_DIR / "sample.txt"
SINGLE_MONKEY_TXT = DATA_DIR / "monkey.txt"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def sample_text() -> str:
    """The canonical four-monkey notes."""
    return SAMPLE_TXT.read_text(encoding="utf-8")


@pytest.fixture
def single_monkey_text() -> str:
    """A file holding exactly one record (Monkey 3)."""
    return SINGLE_MONKEY_TXT.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against sample input files)",
    )
