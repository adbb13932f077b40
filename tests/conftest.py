import pytest

from maestro.api.client import MaestroClient
from maestro.data.configuration import Configuration, Network

from tests.support import API_KEY, RecordingSession


@pytest.fixture
def session():
    return RecordingSession()


@pytest.fixture
def config(session):
    return Configuration(API_KEY, network=Network.PREPROD, session=session)


@pytest.fixture
def client(config):
    return MaestroClient(config)
