from nicegui import ui

def render_not_found():
    with ui.column().classes('w-full items-center q-mt-xl gap-2'):
        ui.icon('catching_pokemon', size='6rem').classes('text-primary')
        ui.label('404').classes('text-h2 font-bold')
        ui.label('Pokémon Not Found!').classes('text-h5')
        ui.label('This Pokémon has fled! It might not exist or the name/ID is incorrect.') \
            .classes('text-grey-7 text-center')
        ui.button('← Return to Pokédex', on_click=lambda: ui.navigate.to('/pokedex')).props('color=primary')
