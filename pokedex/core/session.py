import logging
from typing import Callable, Dict, List, Optional

from pokedex.core.errors import InvalidInput

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 2

def validate_trainer_name(raw: Optional[str]) -> str:
    """Returns the trimmed name or raises InvalidInput with a user-facing message."""
    name = (raw or '').strip()
    if not name:
        raise InvalidInput("Please enter your name")
    if len(name) < MIN_NAME_LENGTH:
        raise InvalidInput(f"Name must be at least {MIN_NAME_LENGTH} characters")
    return name

def normalize_lookup(raw: Optional[str]) -> str:
    """Normalizes a name/ID lookup typed into the search box."""
    term = (raw or '').strip().lower()
    if not term:
        raise InvalidInput("Please enter a Pokémon name or ID")
    return term

class TrainerSession:
    """
    Holds the trainer name entered on the home page.
    Only the home form writes it; pages read it or subscribe to changes.
    """
    def __init__(self, name: Optional[str] = None):
        self._name: Optional[str] = name
        self._listeners: List[Callable[[str], None]] = []

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def has_name(self) -> bool:
        return bool(self._name)

    def set_name(self, raw: str) -> str:
        name = validate_trainer_name(raw)
        self._name = name
        logger.info(f"Trainer name set to '{name}'")
        for listener in list(self._listeners):
            listener(name)
        return name

    def subscribe(self, listener: Callable[[str], None]):
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[str], None]):
        if listener in self._listeners:
            self._listeners.remove(listener)

class SessionRegistry:
    """
    One TrainerSession per browser. Keys are the browser ids NiceGUI keeps in
    its signed session cookie, so a name entered in one browser is never seen
    by another.
    """
    def __init__(self):
        self._sessions: Dict[str, TrainerSession] = {}

    def get(self, key: str) -> TrainerSession:
        if key not in self._sessions:
            self._sessions[key] = TrainerSession()
            logger.debug(f"New trainer session for {key}")
        return self._sessions[key]

    def drop(self, key: str):
        self._sessions.pop(key, None)

    def __len__(self) -> int:
        return len(self._sessions)
