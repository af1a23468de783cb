import pytest

from iranid.adapters.resources.core import ReferenceCollection
from iranid.adapters.resources.hometowns_repo import HometownRepository
from iranid.app import create_app
from iranid.config.settings import TestConfig
from iranid.domain.hometown import Hometown
from iranid.services.national_id_service import NationalIdService


@pytest.fixture
def app():
    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def shared_code_hometowns():
    # Two offices registered under 279, one under 280
    return [
        Hometown('province-a', 'city-a', frozenset({'279'})),
        Hometown('province-b', 'city-b', frozenset({'280'})),
        Hometown('province-c', 'city-c', frozenset({'279', '281'})),
    ]


@pytest.fixture
def fixture_national_id_service(shared_code_hometowns):
    repo = HometownRepository(ReferenceCollection.of(shared_code_hometowns))
    return NationalIdService(repo)
