from nicegui import ui
from typing import Optional
import logging

from pokedex.core.config import config_manager
from pokedex.core.constants import ALL_CATEGORIES
from pokedex.core.categories import resolve_source, switch_category
from pokedex.core.errors import FetchFailed, InvalidArgument, InvalidInput
from pokedex.core.filtering import sort_records
from pokedex.core.models import PageState
from pokedex.core.pagination import Paginator
from pokedex.core.request_tracker import RequestTracker
from pokedex.core.session import TrainerSession, normalize_lookup
from pokedex.core.utils import format_number
from pokedex.services.pokeapi import PokeApiService, pokeapi_service
from pokedex.ui.components.pagination_bar import PaginationBar
from pokedex.ui.components.pokemon_card import render_pokemon_card

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = 'Failed to load Pokémon. Please try again.'

CARD_SORT_OPTIONS = {
    'id': 'Number',
    'name': 'Name',
    'height': 'Tallest',
    'weight': 'Heaviest',
}

class PokedexPage:
    def __init__(self, session: TrainerSession, service: Optional[PokeApiService] = None):
        self.session = session
        self.service = service or pokeapi_service

        self.state = {
            'resources': [],
            'page_cards': [],
            'categories': [],
            'categories_loading': True,
            'type_selected': ALL_CATEGORIES,
            'page_state': PageState(page_size=config_manager.get_page_size()),
            'loading': True,
            'cards_loading': False,
            'error': None,
            'lookup_text': '',
            'lookup_error': '',
            'card_sort': 'id',
        }

        # One tracker per fetch kind; a newer request makes older responses stale
        self.collection_requests = RequestTracker()
        self.card_requests = RequestTracker()

        self.pagination_bar = PaginationBar(self.change_page, config_manager.get_pagination_block_size())
        self.type_select = None
        self.lookup_input = None
        self.lookup_error_label = None

    # --- Data ---

    async def load_categories(self):
        try:
            self.state['categories'] = await self.service.fetch_categories()
        except FetchFailed as e:
            logger.error(f"Failed to load types: {e}")
            self.state['categories'] = []
        finally:
            self.state['categories_loading'] = False
        self.update_type_options()

    async def load_pokemons(self):
        type_selected = self.state['type_selected']
        ticket = self.collection_requests.issue(type_selected)
        # Card batches for the previous list must not land after this point
        self.card_requests.issue(None)
        self.state['page_cards'] = []
        self.state['cards_loading'] = False

        self.state['loading'] = True
        self.state['error'] = None
        self.refresh()

        source = resolve_source(type_selected)
        try:
            resources = await self.service.fetch_collection(source)
            error = None
        except FetchFailed as e:
            # Covers ResolutionFailed: show an empty list and the error, never the previous type's data
            logger.error(f"Failed to load Pokémon for {type_selected}: {e}")
            resources = []
            error = LOAD_ERROR_MESSAGE

        if not self.collection_requests.is_current(ticket):
            logger.debug(f"Discarding stale list response for {type_selected}")
            return

        self.state['resources'] = resources
        self.state['error'] = error
        self.state['page_state'] = self.state['page_state'].with_total(len(resources))
        self.state['loading'] = False
        await self.load_page_cards()

    async def load_page_cards(self):
        page_state: PageState = self.state['page_state']
        ticket = self.card_requests.issue((self.state['type_selected'], page_state.current_page))

        refs = [r.url or r.name for r in page_state.slice(self.state['resources'])]
        self.state['cards_loading'] = True
        self.refresh()

        cards = await self.service.fetch_pokemon_batch(refs) if refs else []

        if not self.card_requests.is_current(ticket):
            logger.debug(f"Discarding stale cards for page {page_state.current_page}")
            return

        self.state['page_cards'] = cards
        self.state['cards_loading'] = False
        self.refresh()

    # --- Events ---

    async def on_type_change(self, value: Optional[str]):
        _, page_state = switch_category(self.state['page_state'], value)
        self.state['type_selected'] = value or ALL_CATEGORIES
        self.state['page_state'] = page_state
        await self.load_pokemons()

    async def change_page(self, page: int):
        page_state: PageState = self.state['page_state']
        try:
            target = Paginator(page_state.total_pages, page_state.current_page).go_to(page)
        except InvalidArgument as e:
            logger.warning(f"Ignoring page change: {e}")
            return
        if target == page_state.current_page:
            return
        self.state['page_state'] = page_state.with_page(target)
        await self.load_page_cards()

    def on_card_sort_change(self, value: str):
        self.state['card_sort'] = value if value in CARD_SORT_OPTIONS else 'id'
        self.refresh()

    def visible_cards(self):
        return sort_records(self.state['page_cards'], self.state['card_sort'])

    def on_lookup_change(self, value: str):
        self.state['lookup_text'] = value or ''
        if self.state['lookup_error']:
            self.set_lookup_error('')

    def set_lookup_error(self, message: str):
        self.state['lookup_error'] = message
        if self.lookup_error_label:
            self.lookup_error_label.set_text(message)
            self.lookup_error_label.set_visibility(bool(message))

    def submit_lookup(self) -> Optional[str]:
        try:
            term = normalize_lookup(self.state['lookup_text'])
        except InvalidInput as e:
            self.set_lookup_error(str(e))
            return None

        self.state['lookup_text'] = ''
        if self.lookup_input:
            self.lookup_input.set_value('')
        self.set_lookup_error('')
        ui.navigate.to(f'/pokedex/{term}')
        return term

    # --- Rendering ---

    def refresh(self):
        if hasattr(self, 'render_results'):
            self.render_results.refresh()

    def type_options(self):
        options = {ALL_CATEGORIES: 'Loading types...' if self.state['categories_loading'] else 'All Pokémon'}
        for category in self.state['categories']:
            options[category.id] = category.display_name
        return options

    def update_type_options(self):
        if self.type_select:
            self.type_select.set_options(self.type_options(), value=self.state['type_selected'])
            self.type_select.set_enabled(not self.state['categories_loading'])

    def render_header(self):
        with ui.column().classes('w-full items-center gap-1'):
            ui.label('Pokédex').classes('text-h3 font-bold text-primary')
            ui.label(f"Welcome {self.session.name}, here you can find your favorite Pokémon.") \
                .classes('text-subtitle1 text-grey-8')

        with ui.row().classes('w-full max-w-4xl items-start justify-between q-mt-md gap-4'):
            with ui.column().classes('gap-0'):
                with ui.row().classes('items-center gap-2'):
                    self.lookup_input = ui.input(placeholder='Find a Pokémon', on_change=lambda e: self.on_lookup_change(e.value)) \
                        .props('dense outlined aria-label="Search Pokémon by name or ID"') \
                        .on('keydown.enter', self.submit_lookup)
                    ui.button('Search', on_click=self.submit_lookup).props('color=primary')
                self.lookup_error_label = ui.label('').classes('text-negative text-sm')
                self.lookup_error_label.set_visibility(False)

            self.type_select = ui.select(self.type_options(), value=self.state['type_selected'],
                                         on_change=lambda e: self.on_type_change(e.value)) \
                .props('dense outlined aria-label="Filter Pokémon by type"').classes('w-56')
            self.type_select.set_enabled(False)

            ui.select(CARD_SORT_OPTIONS, value=self.state['card_sort'], label='Sort page by',
                      on_change=lambda e: self.on_card_sort_change(e.value)) \
                .props('dense outlined').classes('w-40')

    @ui.refreshable
    def render_results(self):
        if self.state['error']:
            with ui.card().classes('bg-red-1 q-pa-md'):
                ui.label(self.state['error']).classes('text-negative')

        if self.state['loading']:
            with ui.column().classes('w-full items-center q-mt-xl'):
                ui.spinner('dots', size='xl', color='primary')
                ui.label('Loading Pokémon...')
            return

        if not self.state['resources']:
            ui.label('No Pokémon found').classes('w-full text-center text-xl text-grey italic q-mt-xl')
            return

        ui.label(f"{format_number(self.state['page_state'].total_items)} Pokémon").classes('text-grey-7')

        if self.state['cards_loading']:
            ui.linear_progress(show_value=False).props('indeterminate color=primary').classes('w-full max-w-4xl')

        with ui.row().classes('w-full max-w-6xl justify-center gap-4 q-mt-md'):
            for pokemon in self.visible_cards():
                render_pokemon_card(pokemon)

        self.pagination_bar.build(self.state['page_state'])

    def build_ui(self):
        self.render_header()
        self.render_results()
        ui.timer(0.1, self.load_categories, once=True)
        ui.timer(0.1, self.load_pokemons, once=True)

def pokedex_page(session: TrainerSession):
    page = PokedexPage(session)
    page.build_ui()
