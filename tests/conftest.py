import pytest

from tests.helpers import StubProvider


@pytest.fixture
def provider():
    return StubProvider()
