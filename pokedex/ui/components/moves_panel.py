from nicegui import ui
from typing import List
from pokedex.core.models import PokemonMove, SearchState
from pokedex.core.filtering import filter_and_sort
from pokedex.core.utils import format_display_name

def move_name(move: PokemonMove) -> str:
    return move.move.name

class MovesPanel:
    def __init__(self, moves: List[PokemonMove]):
        self.moves = moves
        self.search = SearchState()
        self.sort_button = None

    def visible_moves(self) -> List[PokemonMove]:
        return filter_and_sort(self.moves, self.search.query, self.search.sort_order, move_name)

    def summary(self, count: int) -> str:
        if count == 0:
            return 'No moves found'
        return f"Showing {count} move{'s' if count != 1 else ''}"

    def sort_label(self) -> str:
        return 'Sort ↓' if self.search.sort_order == 'asc' else 'Sort ↑'

    def on_search(self, value: str):
        self.search = self.search.with_query(value)
        self.render_moves.refresh()

    def toggle_sort(self):
        self.search = self.search.toggled()
        if self.sort_button:
            self.sort_button.set_text(self.sort_label())
        self.render_moves.refresh()

    @ui.refreshable
    def render_moves(self):
        moves = self.visible_moves()
        ui.label(self.summary(len(moves))).classes('text-grey-7 text-sm')
        if not moves:
            return
        with ui.row().classes('w-full gap-2'):
            for move in moves:
                ui.label(format_display_name(move_name(move))).classes('q-px-md q-py-xs rounded-full bg-grey-3 text-sm')

    def build(self):
        with ui.row().classes('w-full items-center gap-2'):
            ui.input(placeholder='Search moves...', on_change=lambda e: self.on_search(e.value)) \
                .props('dense outlined clearable debounce=300').classes('flex-grow')
            self.sort_button = ui.button(self.sort_label(), on_click=self.toggle_sort).props('outline color=secondary')
        self.render_moves()
