from nicegui import ui
from pokedex.ui.theme import apply_theme
from pokedex.core.config import config_manager
from pokedex.core.session import TrainerSession
from pokedex.services.log_stream import log_stream

def create_layout(content_function, session: TrainerSession):
    """
    Wraps the content_function in the standard application layout
    (Header with trainer greeting, Content Area).
    """
    apply_theme(config_manager.get_theme())

    def open_activity():
        with ui.dialog() as d, ui.card().classes('w-[40rem]'):
            ui.label('Activity').classes('text-h6')
            log = ui.log(max_lines=100).classes('w-full h-80 text-xs')
            for line in log_stream.recent():
                log.push(line)

            log_stream.register(log.push)

            def close():
                log_stream.unregister(log.push)
                d.close()

            with ui.row().classes('w-full justify-end q-mt-md'):
                ui.button('Close', on_click=close).props('flat')
        d.open()

    def toggle_theme():
        theme = "light" if config_manager.get_theme() == "dark" else "dark"
        config_manager.set_theme(theme)
        apply_theme(theme)

    with ui.header().classes(replace='row items-center') as header:
        header.classes('bg-primary text-white q-px-md')
        ui.button('Pokédex', icon='catching_pokemon', on_click=lambda: ui.navigate.to('/pokedex')) \
            .props('flat color=white').classes('text-h6 font-bold')
        ui.space()
        if session.has_name:
            ui.label(f'Trainer: {session.name}').classes('text-subtitle1')
        with ui.button(icon='dark_mode', on_click=toggle_theme).props('flat color=white'):
            ui.tooltip('Toggle dark mode')
        with ui.button(icon='receipt_long', on_click=open_activity).props('flat color=white'):
            ui.tooltip('Show recent activity')

    with ui.column().classes('w-full q-pa-md items-center'):
        content_function()
