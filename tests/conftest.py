"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from bigdecimal import BigDecimal


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog.configure() a test performed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mixed_scales() -> list[BigDecimal]:
    """Values spread over several scales and signs."""
    return [
        BigDecimal(5),
        BigDecimal(-125, 2),
        BigDecimal(3, 7),
        BigDecimal(10**30 + 1, 12),
        BigDecimal(-999, 0),
    ]
