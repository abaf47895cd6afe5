"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from goexphash.extract import collect_declarations  # noqa: E402
from goexphash.models import Declaration  # noqa: E402
from goexphash.parse import parse_source  # noqa: E402

GO_FIXTURES_DIR = Path(__file__).parent / "fixtures" / "go"


@pytest.fixture
def go_fixtures_dir() -> Path:
    """Directory holding the Go fixture packages."""
    return GO_FIXTURES_DIR


@pytest.fixture
def write_package(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing Go files into a fresh package directory.

    Files are given as a mapping of file name to source text.
    """

    def _factory(files: dict[str, str], name: str = "pkg") -> Path:
        package_dir = tmp_path / name
        package_dir.mkdir(parents=True, exist_ok=True)
        for filename, source in files.items():
            (package_dir / filename).write_text(source, encoding="utf-8")
        return package_dir

    return _factory


@pytest.fixture
def declarations_of() -> Callable[[str], list[Declaration]]:
    """Factory parsing Go source and returning its top-level declarations."""

    def _factory(source: str) -> list[Declaration]:
        return collect_declarations(parse_source(source, filename="test.go"))

    return _factory
