import os

import pytest

from refraction.config import ENV_PREFIX, RefractionSettings, get_settings
from tests.fixtures import Child


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep REFRACTION_* variables from the surrounding shell out of the tests."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return RefractionSettings()


@pytest.fixture
def child():
    return Child()
