import pytest
from unittest.mock import MagicMock, patch

from pokedex.ui.home import HomePage
from pokedex.core.session import TrainerSession

@pytest.fixture
def mock_ui():
    with patch('pokedex.ui.home.ui') as u:
        yield u

def test_empty_name_shows_error(mock_ui):
    session = TrainerSession()
    page = HomePage(session)
    page.error_label = MagicMock()

    assert page.submit() is False
    assert page.state['error'] == "Please enter your name"
    assert session.name is None
    page.error_label.set_text.assert_called_with("Please enter your name")
    mock_ui.navigate.to.assert_not_called()

def test_short_name_shows_error(mock_ui):
    page = HomePage(TrainerSession())
    page.on_name_change(" A ")
    assert page.submit() is False
    assert page.state['error'] == "Name must be at least 2 characters"

def test_typing_clears_error(mock_ui):
    page = HomePage(TrainerSession())
    page.error_label = MagicMock()
    page.submit()

    page.on_name_change("As")
    assert page.state['error'] == ''
    page.error_label.set_visibility.assert_called_with(False)

def test_valid_name_navigates(mock_ui):
    session = TrainerSession()
    received = []
    session.subscribe(received.append)

    page = HomePage(session)
    page.on_name_change("  Ash  ")
    assert page.submit() is True

    assert session.name == "Ash"
    assert received == ["Ash"]
    mock_ui.navigate.to.assert_called_once_with('/pokedex')

def test_prefills_existing_name(mock_ui):
    page = HomePage(TrainerSession("Misty"))
    assert page.state['name'] == "Misty"
