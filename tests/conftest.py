import pytest
from solr_message import create_app


@pytest.fixture
def app():
    """Create and configure a new app instance for each test."""
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def boost_callback():
    """An add callback boosting every document and the 'nickname' field of Tim"""
    def callback(doc):
        doc.attrs['boost'] = 10
        nickname = doc.field_by_name('nickname')
        if nickname is not None and nickname.value == 'Tim':
            nickname.attrs['boost'] = 20
    return callback
