"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path


@pytest.fixture
def valid_cpfs() -> list[str]:
    """Known valid CPFs (generated for testing)."""
    return ["12345678909", "52998224725", "11144477735"]


@pytest.fixture
def valid_cnpjs() -> list[str]:
    """Known valid CNPJs (generated for testing)."""
    return ["11222333000181", "11444777000161"]


@pytest.fixture
def documents_file(tmp_path: Path) -> Path:
    """Write a batch file with two valid documents and one invalid."""
    path = tmp_path / "documentos.txt"
    path.write_text(
        "123.456.789-09\n\n11.222.333/0001-81\n12345678901\n",
        encoding="utf-8",
    )
    return path
