"""Shared fixtures for the mailcheck test suite."""

import io
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from openpyxl import Workbook

from mailcheck.main import app

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def xlsx_bytes():
    """Build an in-memory workbook whose first column holds the given values."""

    def _build(rows):
        wb = Workbook()
        ws = wb.active
        for row in rows:
            ws.append(list(row))
        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()

    return _build


@pytest.fixture
def xls_bytes() -> bytes:
    """BIFF8 workbook: john.doe@example.com, user@example, then a@b.org in column B."""
    return (FIXTURES / "emails.xls").read_bytes()
