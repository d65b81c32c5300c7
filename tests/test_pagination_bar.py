import pytest
from unittest.mock import MagicMock, patch

from pokedex.ui.components.pagination_bar import PaginationBar
from pokedex.core.models import PageState

@pytest.fixture
def mock_ui():
    with patch('pokedex.ui.components.pagination_bar.ui') as u:
        yield u

def button_labels(mock_ui):
    return [c.args[0] for c in mock_ui.button.call_args_list]

def test_single_page_renders_nothing(mock_ui):
    PaginationBar(MagicMock()).build(PageState(page_size=8, total_items=5))
    mock_ui.row.assert_not_called()
    mock_ui.button.assert_not_called()

def test_first_page_controls(mock_ui):
    PaginationBar(MagicMock()).build(PageState(current_page=1, page_size=8, total_items=100))
    assert button_labels(mock_ui) == ['1', '2', '3', '4', '5', '6', '7', '8', '>', '»']

def test_middle_page_controls(mock_ui):
    PaginationBar(MagicMock()).build(PageState(current_page=9, page_size=1, total_items=20))
    assert button_labels(mock_ui) == ['«', '<', '9', '10', '11', '12', '13', '14', '15', '16', '>', '»']
    assert mock_ui.label.call_count == 2

def test_page_click_forwards_target(mock_ui):
    on_page = MagicMock()
    PaginationBar(on_page).build(PageState(current_page=1, page_size=8, total_items=100))

    clicks = {c.args[0]: c.kwargs['on_click'] for c in mock_ui.button.call_args_list}
    clicks['3']()
    clicks['>']()
    clicks['»']()
    assert [c.args[0] for c in on_page.call_args_list] == [3, 2, 13]
