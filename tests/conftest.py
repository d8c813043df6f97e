import pytest

from shaderflat import MappingLoader, Session


@pytest.fixture
def session():
    return Session()


@pytest.fixture
def make_loader():
    def _make(files):
        return MappingLoader(files)
    return _make
