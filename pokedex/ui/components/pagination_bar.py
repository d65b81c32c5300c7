from nicegui import ui
from typing import Awaitable, Callable
from pokedex.core.models import PageState
from pokedex.core.pagination import Paginator, compute_window
from pokedex.core.constants import DEFAULT_BLOCK_SIZE

class PaginationBar:
    """
    Renders the page buttons for a PageState. Clicks are forwarded to
    `on_page` with the target page; the owner updates its own state.
    """
    def __init__(self, on_page: Callable[[int], Awaitable[None]], block_size: int = DEFAULT_BLOCK_SIZE):
        self.on_page = on_page
        self.block_size = block_size

    def build(self, page_state: PageState):
        window = compute_window(page_state.current_page, page_state.total_pages, self.block_size)
        if not window.has_controls:
            return

        paginator = Paginator(page_state.total_pages, page_state.current_page)

        with ui.row().classes('items-center justify-center gap-1 q-mt-md'):
            if window.show_first:
                with ui.button('«', on_click=lambda: self.on_page(paginator.first())).props('flat dense'):
                    ui.tooltip('Go to first page')
            if window.show_prev:
                with ui.button('<', on_click=lambda: self.on_page(paginator.prev())).props('flat dense'):
                    ui.tooltip('Go to previous page')

            if window.show_left_ellipsis:
                ui.label('...').classes('text-grey')

            for number in window.visible_pages:
                btn = ui.button(str(number), on_click=lambda n=number: self.on_page(paginator.go_to(n))).props('dense')
                if number == page_state.current_page:
                    btn.props('color=primary')
                else:
                    btn.props('flat color=grey-8')

            if window.show_right_ellipsis:
                ui.label('...').classes('text-grey')

            if window.show_next:
                with ui.button('>', on_click=lambda: self.on_page(paginator.next())).props('flat dense'):
                    ui.tooltip('Go to next page')
            if window.show_last:
                with ui.button('»', on_click=lambda: self.on_page(paginator.last())).props('flat dense'):
                    ui.tooltip('Go to last page')
