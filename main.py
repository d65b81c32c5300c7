from nicegui import ui, app
from fastapi.responses import JSONResponse

from pokedex.core.config import config_manager
from pokedex.core.logging_setup import setup_logging
setup_logging(level=config_manager.get_log_level())

from pokedex.ui.layout import create_layout
from pokedex.ui.home import home_page
from pokedex.ui.pokedex_page import pokedex_page
from pokedex.ui.pokemon_detail import pokemon_detail_page
from pokedex.ui.sessions import current_session, require_trainer

@ui.page('/')
def home():
    session = current_session()
    create_layout(lambda: home_page(session), session)

@ui.page('/pokedex')
def pokedex():
    session = current_session()
    redirect = require_trainer(session)
    if redirect:
        return redirect
    create_layout(lambda: pokedex_page(session), session)

@ui.page('/pokedex/{id_or_name}')
def pokemon_detail(id_or_name: str):
    session = current_session()
    redirect = require_trainer(session)
    if redirect:
        return redirect
    create_layout(lambda: pokemon_detail_page(id_or_name), session)

# Handle Chrome DevTools probe to prevent 404 warnings
@app.get('/.well-known/appspecific/com.chrome.devtools.json')
def chrome_devtools_probe():
    return JSONResponse(content={})

if __name__ in {"__main__", "__mp_main__"}:
    ui.run(title='Pokédex', favicon='⚡', reload=False, storage_secret=config_manager.get_storage_secret())
