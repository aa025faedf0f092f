import pytest

from deckprints.models import failure as failure_module


@pytest.fixture(autouse=True)
def clear_finalized_responses():
    """Clear the finalized responses set between tests.

    Python can reuse memory addresses for new objects, causing id()
    collisions with previously finalized responses.
    """
    failure_module._finalized_responses.clear()
    yield
    failure_module._finalized_responses.clear()


@pytest.fixture
def sample_decklist() -> str:
    """Sample deck list with quantities and blank lines."""
    return """4 Lightning Bolt
4 Monastery Swiftspear

20 Mountain
"""
