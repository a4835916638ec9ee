from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from apioptions.slots import OutputSlots
from apioptions.utils.structured_logging import clear_correlation_id

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def outputs() -> OutputSlots:
    """Create output slots with every slot bound."""
    return OutputSlots.bind_all()


@pytest.fixture
def mock_emitter() -> Mock:
    """Create a mock host emitter receiving the terminal event."""
    return Mock()


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()


@pytest.fixture(autouse=True)
def _reset_correlation_id() -> Generator[None, None, None]:
    yield
    clear_correlation_id()
