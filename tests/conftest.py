import pytest
import structlog

from src.common.constants import REFERENCE_DATA


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applies"""
    yield
    structlog.reset_defaults()


@pytest.fixture
def data():
    """The reference scenario as a fresh list"""
    return list(REFERENCE_DATA)
