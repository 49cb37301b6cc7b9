import pytest

from zksha256.types import field_for


@pytest.fixture
def field():
    return field_for("bls12_381")
