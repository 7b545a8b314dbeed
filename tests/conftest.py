import pytest

from config.test import TestSettings
from main import build_registries

# Principals used throughout the tests
CONTRACT_OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
VERIFIER = "ST2REHHS5J3CERCRBEPMGH7NIV22XCFT1NZTX83F"
OUTSIDER = "ST3NBRSFKX28FQ2ZJ1MAKX58HKHSDGNV5NH9TEBD"


@pytest.fixture
def test_settings():
    return TestSettings(CONTRACT_OWNER=CONTRACT_OWNER, LOG_LEVEL="DEBUG")


@pytest.fixture
def registries(test_settings):
    """Fresh registries for every test."""
    return build_registries(test_settings)


@pytest.fixture
def asset_registry(registries):
    return registries.assets


@pytest.fixture
def lessee_registry(registries):
    return registries.lessees


@pytest.fixture
def owner():
    return CONTRACT_OWNER


@pytest.fixture
def verifier():
    return VERIFIER


@pytest.fixture
def outsider():
    return OUTSIDER
