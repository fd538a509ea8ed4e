"""Shared fixtures for selector extractor tests."""

from pathlib import Path

import pytest

TESTCASES_DIR = Path(__file__).parent / "testcases"


@pytest.fixture
def read_testcase():
    """Return a reader for fixture files under tests/testcases."""

    def _read(relative: str) -> str:
        return (TESTCASES_DIR / relative).read_text(encoding="utf-8")

    return _read


@pytest.fixture
def testcases_dir() -> Path:
    """Directory holding the html/ and jsx/ fixture files."""
    return TESTCASES_DIR
