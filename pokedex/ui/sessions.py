from typing import Optional
from fastapi.responses import RedirectResponse
from nicegui import app

from pokedex.core.session import SessionRegistry, TrainerSession

sessions = SessionRegistry()

def current_session() -> TrainerSession:
    """Trainer session of the browser making the current page request."""
    return sessions.get(app.storage.browser['id'])

def require_trainer(session: TrainerSession) -> Optional[RedirectResponse]:
    """Pages past the home form need a name; without one the browser is sent back to '/'."""
    if session.has_name:
        return None
    return RedirectResponse('/')
