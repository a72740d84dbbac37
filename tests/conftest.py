"""Shared pytest fixtures for csv_to_apple_dict tests."""

import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def glossary_csv(fixtures_dir: Path) -> Path:
    """Path to glossary.csv fixture."""
    return fixtures_dir / "glossary.csv"


@pytest.fixture
def duplicates_csv(fixtures_dir: Path) -> Path:
    """Path to duplicates.csv fixture."""
    return fixtures_dir / "duplicates.csv"


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for file output tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def parse_output():
    """Parse a written dictionary file and return its root element."""

    def _parse(path: Path) -> ET.Element:
        return ET.parse(path).getroot()

    return _parse
