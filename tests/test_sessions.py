import pytest
from unittest.mock import MagicMock, patch
from fastapi.responses import RedirectResponse

from pokedex.core.session import SessionRegistry, TrainerSession
from pokedex.ui.sessions import current_session, require_trainer

@pytest.fixture
def registry():
    with patch('pokedex.ui.sessions.sessions', SessionRegistry()) as r:
        yield r

@pytest.fixture
def mock_app():
    with patch('pokedex.ui.sessions.app') as a:
        yield a

def browse_as(mock_app, browser_id):
    mock_app.storage.browser = {'id': browser_id}
    return current_session()

def test_each_browser_keeps_its_own_name(registry, mock_app):
    ash = browse_as(mock_app, 'browser-a')
    ash.set_name("Ash")

    misty = browse_as(mock_app, 'browser-b')
    assert misty is not ash
    assert misty.name is None

    misty.set_name("Misty")
    assert browse_as(mock_app, 'browser-a').name == "Ash"
    assert browse_as(mock_app, 'browser-b').name == "Misty"
    assert len(registry) == 2

def test_same_browser_gets_same_session(registry, mock_app):
    first = browse_as(mock_app, 'browser-a')
    assert browse_as(mock_app, 'browser-a') is first

def test_drop_forgets_session():
    registry = SessionRegistry()
    registry.get('browser-a').set_name("Ash")
    registry.drop('browser-a')
    assert registry.get('browser-a').name is None
    registry.drop('unknown')

def test_pages_redirect_home_without_name():
    response = require_trainer(TrainerSession())
    assert isinstance(response, RedirectResponse)
    assert response.headers['location'] == '/'

def test_pages_open_with_name():
    assert require_trainer(TrainerSession("Ash")) is None
