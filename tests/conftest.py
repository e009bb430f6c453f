"""Pytest configuration for dataknobs_checker tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_checker import CheckContext, Schema, number, siret, string  # noqa: E402


@pytest.fixture
def context():
    """A root-level full check context."""
    return CheckContext(ariane="field")


@pytest.fixture
def sanitize_context():
    """A context with sanitize mode on."""
    return CheckContext(ariane="field", sanitize=True)


@pytest.fixture
def company_schema():
    """A nested schema mixing primitive and derived checkers."""
    return Schema({
        "name": string(mandatory=True, max_length=64),
        "company": {
            "siret": siret(mandatory=True),
            "employees": number(is_integer=True, is_positive=True),
        },
    })
