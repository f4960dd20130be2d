# tests/conftest.py
from __future__ import annotations

import pytest

from nested_schema import StringErrorReporter, StructuredErrorReporter


@pytest.fixture
def structured():
    return StructuredErrorReporter()


@pytest.fixture
def strings():
    return StringErrorReporter()


@pytest.fixture(params=["structured", "string"])
def any_reporter(request):
    """Run a test once per built-in reporter."""
    if request.param == "structured":
        return StructuredErrorReporter()
    return StringErrorReporter()
