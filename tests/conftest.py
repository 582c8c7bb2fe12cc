import pytest

import utils
from errors import StoreWriteError
from region import Region


class FailingRegion(Region):
    ''' Region whose put fails for one key '''

    def __init__(self, fail_key):
        super().__init__('failing')
        self.fail_key = fail_key
        self.attempts = []

    def put(self, key, value):
        self.attempts.append(key)
        if key == self.fail_key:
            raise StoreWriteError(key, 'connection lost')
        return super().put(key, value)


@pytest.fixture
def region():
    return Region('exampleRegion')


@pytest.fixture
def failing_region():
    return FailingRegion('foo3')


@pytest.fixture
def failing_region_at():
    return FailingRegion


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv('REGION_NAMES', 'exampleRegion,other')
    monkeypatch.delenv('MAX_VAL_SIZE', raising=False)
    utils.init()
    from region_server import app
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
