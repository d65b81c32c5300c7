from nicegui import ui
from pokedex.core.models import Pokemon
from pokedex.core.utils import get_type_color, abbreviate_stat_name, random_description, truncate_text

def render_type_chips(pokemon: Pokemon):
    with ui.row().classes('gap-1 justify-center'):
        for type_name in pokemon.type_names:
            ui.label(type_name).classes('text-white text-xs q-px-sm rounded uppercase') \
                .style(f'background-color: {get_type_color(type_name)}')

def render_pokemon_card(pokemon: Pokemon):
    color = get_type_color(pokemon.primary_type)

    with ui.card().classes('w-56 cursor-pointer items-center hover:shadow-lg') \
            .style(f'border: 3px solid {color}') \
            .on('click', lambda: ui.navigate.to(f'/pokedex/{pokemon.id}')):
        with ui.element('div').classes('w-full flex justify-center rounded').style(f'background-color: {color}'):
            if pokemon.image_url:
                ui.image(pokemon.image_url).classes('w-32 h-32').props('fit=contain loading=lazy')
            else:
                ui.icon('help_outline', size='4rem').classes('text-white q-my-md')

        ui.label(f"#{pokemon.id}").classes('text-xs text-grey')
        ui.label(pokemon.display_name).classes('text-h6 font-bold').style(f'color: {color}')
        ui.label(truncate_text(random_description(pokemon.primary_type), 40)).classes('text-caption text-grey-7 italic text-center')
        render_type_chips(pokemon)
        ui.label('Type').classes('text-xs text-grey')

        with ui.grid(columns=3).classes('w-full gap-1 q-mt-sm'):
            for stat in pokemon.stats:
                with ui.column().classes('items-center gap-0'):
                    ui.label(abbreviate_stat_name(stat.stat.name)).classes('text-xs text-grey')
                    ui.label(str(stat.base_stat)).classes('text-subtitle2 font-bold').style(f'color: {color}')
