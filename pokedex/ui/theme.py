from nicegui import ui

def apply_theme(theme: str = "light"):
    """Applies the global color theme to the application."""
    ui.colors(
        primary='#cc0000',   # Pokédex red
        secondary='#3b4cca', # Pokémon blue
        accent='#ffde00',    # Pikachu yellow
        dark='#1d1d1d',
        positive='#7AC74C',
        negative='#C22E28',
        info='#6390F0',
        warning='#F7D02C'
    )
    if theme == "dark":
        ui.dark_mode().enable()
    else:
        ui.dark_mode().disable()
