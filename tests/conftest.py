import pytest

from markupbuilder import clearcomponents, resetconfig


@pytest.fixture(autouse=True)
def clean_state():
    """Reset the default configuration and the component registry."""
    resetconfig()
    clearcomponents()
    yield
    resetconfig()
    clearcomponents()
