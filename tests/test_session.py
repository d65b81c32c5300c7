import pytest

from pokedex.core.session import TrainerSession, validate_trainer_name, normalize_lookup
from pokedex.core.errors import InvalidInput

def test_validate_trainer_name():
    assert validate_trainer_name("  Ash ") == "Ash"

    with pytest.raises(InvalidInput, match="Please enter your name"):
        validate_trainer_name("   ")
    with pytest.raises(InvalidInput, match="at least 2 characters"):
        validate_trainer_name("A")
    with pytest.raises(InvalidInput):
        validate_trainer_name(None)

def test_normalize_lookup():
    assert normalize_lookup("  Pikachu ") == "pikachu"
    assert normalize_lookup("025") == "025"
    with pytest.raises(InvalidInput, match="name or ID"):
        normalize_lookup("")

def test_session_single_writer_many_readers():
    session = TrainerSession()
    assert session.name is None
    assert not session.has_name

    seen = []
    session.subscribe(seen.append)
    session.set_name(" Misty ")

    assert session.name == "Misty"
    assert session.has_name
    assert seen == ["Misty"]

    session.unsubscribe(seen.append)
    session.set_name("Brock")
    assert seen == ["Misty"]

def test_invalid_name_keeps_previous_value():
    session = TrainerSession("Ash")
    with pytest.raises(InvalidInput):
        session.set_name("")
    assert session.name == "Ash"
