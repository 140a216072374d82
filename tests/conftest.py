import pytest

from banglaphonetic.config import EngineSettings
from banglaphonetic.engine import PhoneticEngine


@pytest.fixture
def settings():
    return EngineSettings(_env_file=None)


@pytest.fixture
def engine(settings):
    return PhoneticEngine(settings=settings)
