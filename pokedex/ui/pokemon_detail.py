from nicegui import ui
from typing import Optional
import logging

from pokedex.core.errors import FetchFailed, NotFound
from pokedex.core.models import Pokemon
from pokedex.core.request_tracker import RequestTracker
from pokedex.core.utils import (
    is_numeric, is_valid_id, format_height, format_weight, format_display_name,
    get_type_color, stat_percentage, group_by
)
from pokedex.services.pokeapi import PokeApiService, pokeapi_service
from pokedex.ui.components.moves_panel import MovesPanel
from pokedex.ui.components.not_found import render_not_found
from pokedex.ui.components.pokemon_card import render_type_chips

logger = logging.getLogger(__name__)

class PokemonDetailPage:
    def __init__(self, id_or_name: str, service: Optional[PokeApiService] = None):
        self.id_or_name = (id_or_name or '').strip().lower()
        self.service = service or pokeapi_service
        self.state = {
            'pokemon': None,
            'loading': True,
            'not_found': False,
        }
        self.requests = RequestTracker()
        self.moves_panel: Optional[MovesPanel] = None

    async def load_data(self):
        ticket = self.requests.issue(self.id_or_name)

        # Numbers outside the dex range cannot exist, skip the round trip
        if not self.id_or_name or (is_numeric(self.id_or_name) and not is_valid_id(self.id_or_name)):
            logger.info(f"Rejected lookup '{self.id_or_name}' without fetching")
            self._apply(ticket, None)
            return

        pokemon = None
        try:
            pokemon = await self.service.fetch_pokemon(self.id_or_name)
        except NotFound:
            logger.info(f"No Pokémon named '{self.id_or_name}'")
        except FetchFailed as e:
            logger.error(f"Failed to load Pokémon '{self.id_or_name}': {e}")

        self._apply(ticket, pokemon)

    def _apply(self, ticket, pokemon: Optional[Pokemon]):
        if not self.requests.is_current(ticket):
            return
        self.state['pokemon'] = pokemon
        self.state['not_found'] = pokemon is None
        self.state['loading'] = False
        self.moves_panel = MovesPanel(pokemon.moves) if pokemon else None
        if hasattr(self, 'render_content'):
            self.render_content.refresh()

    def render_stats(self, pokemon: Pokemon, color: str):
        with ui.column().classes('w-full gap-1'):
            for stat in pokemon.stats:
                with ui.row().classes('w-full items-center no-wrap gap-2'):
                    ui.label(format_display_name(stat.stat.name)).classes('w-36 text-sm')
                    ui.linear_progress(value=stat_percentage(stat.base_stat) / 100, show_value=False) \
                        .props('rounded size=12px').classes('flex-grow').style(f'color: {color}')
                    ui.label(str(stat.base_stat)).classes('w-10 text-right font-bold')

    def render_pokemon(self, pokemon: Pokemon):
        color = get_type_color(pokemon.primary_type)

        with ui.card().classes('w-full max-w-3xl items-center q-pa-none'):
            with ui.element('div').classes('w-full flex justify-center').style(f'background-color: {color}'):
                if pokemon.image_url:
                    ui.image(pokemon.image_url).classes('w-64 h-64').props('fit=contain')

            ui.label(f"#{pokemon.id} {pokemon.display_name}").classes('text-h4 font-bold q-mt-md').style(f'color: {color}')

            with ui.row().classes('gap-8'):
                with ui.column().classes('items-center gap-0'):
                    ui.label('Height').classes('text-xs text-grey')
                    ui.label(format_height(pokemon.height)).classes('text-subtitle1')
                with ui.column().classes('items-center gap-0'):
                    ui.label('Weight').classes('text-xs text-grey')
                    ui.label(format_weight(pokemon.weight)).classes('text-subtitle1')

            with ui.row().classes('w-full justify-around q-pa-md'):
                with ui.column().classes('items-center'):
                    ui.label('Types').classes('text-h6')
                    render_type_chips(pokemon)
                with ui.column().classes('items-center'):
                    ui.label('Abilities').classes('text-h6')
                    abilities = group_by(pokemon.abilities, 'is_hidden')
                    for ability in abilities.get(False, []):
                        ui.label(format_display_name(ability.ability.name))
                    for ability in abilities.get(True, []):
                        ui.label(f"{format_display_name(ability.ability.name)} (Hidden)").classes('text-grey-7')

            with ui.column().classes('w-full q-pa-md'):
                ui.label('Base Stats').classes('text-h6')
                self.render_stats(pokemon, color)

            with ui.column().classes('w-full q-pa-md'):
                ui.label(f"Moves ({len(pokemon.moves)})").classes('text-h6')
                self.moves_panel.build()

    @ui.refreshable
    def render_content(self):
        if self.state['loading']:
            with ui.column().classes('w-full items-center q-mt-xl'):
                ui.spinner('dots', size='xl', color='primary')
                ui.label('Loading Pokémon...')
            return

        if self.state['not_found'] or not self.state['pokemon']:
            render_not_found()
            return

        ui.button('← Back to Pokédex', on_click=lambda: ui.navigate.to('/pokedex')).props('flat color=primary')
        self.render_pokemon(self.state['pokemon'])

    def build_ui(self):
        self.render_content()
        ui.timer(0.1, self.load_data, once=True)

def pokemon_detail_page(id_or_name: str):
    page = PokemonDetailPage(id_or_name)
    page.build_ui()
