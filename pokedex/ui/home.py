from nicegui import ui
from pokedex.core.session import TrainerSession
from pokedex.core.errors import InvalidInput
import logging

logger = logging.getLogger(__name__)

class HomePage:
    def __init__(self, session: TrainerSession):
        self.session = session
        self.state = {
            'name': session.name or '',
            'error': '',
        }
        self.error_label = None

    def on_name_change(self, value: str):
        self.state['name'] = value or ''
        if self.state['error']:
            self.set_error('')

    def set_error(self, message: str):
        self.state['error'] = message
        if self.error_label:
            self.error_label.set_text(message)
            self.error_label.set_visibility(bool(message))

    def submit(self) -> bool:
        try:
            self.session.set_name(self.state['name'])
        except InvalidInput as e:
            self.set_error(str(e))
            return False

        ui.navigate.to('/pokedex')
        return True

    def build_ui(self):
        with ui.column().classes('w-full max-w-md items-center q-mt-xl gap-4'):
            ui.label('Hello trainer!').classes('text-h3 font-bold text-primary')
            ui.label('Give me your name to start').classes('text-subtitle1 text-grey-8')

            ui.input(placeholder='Type your name', value=self.state['name'],
                     on_change=lambda e: self.on_name_change(e.value)) \
                .props('outlined aria-label="Trainer name"').classes('w-full') \
                .on('keydown.enter', self.submit)

            self.error_label = ui.label('').classes('text-negative text-sm')
            self.error_label.set_visibility(False)

            ui.button('Catch them all!', on_click=self.submit).props('color=primary size=lg')

def home_page(session: TrainerSession):
    page = HomePage(session)
    page.build_ui()
