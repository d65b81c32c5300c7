# Highest national dex number served by the API
MAX_POKEMON_ID = 1025

# Base stats are capped at 255, used to scale the stat bars
MAX_STAT_VALUE = 255

DEFAULT_PAGE_SIZE = 8
DEFAULT_BLOCK_SIZE = 8

# Sentinel for the "All Pokémon" entry of the type selector
ALL_CATEGORIES = "All"

STAT_ABBREVIATIONS = {
    "hp": "HP",
    "attack": "ATK",
    "defense": "DEF",
    "special-attack": "SP.ATK",
    "special-defense": "SP.DEF",
    "speed": "SPD"
}

DEFAULT_TYPE_COLOR = "#A8A77A"

TYPE_COLORS = {
    "grass": "#7AC74C",
    "fire": "#EE8130",
    "water": "#6390F0",
    "bug": "#A6B91A",
    "normal": "#A8A77A",
    "poison": "#A33EA1",
    "electric": "#F7D02C",
    "ground": "#E2BF65",
    "fairy": "#D685AD",
    "fighting": "#C22E28",
    "psychic": "#F95587",
    "rock": "#B6A136",
    "ghost": "#735797",
    "ice": "#96D9D6",
    "dragon": "#6F35FC",
    "dark": "#705746",
    "steel": "#B7B7CE",
    "flying": "#A98FF3"
}

TYPE_DESCRIPTIONS = {
    "fire": ["Burns with passion!", "Hot-headed fighter!", "Flame master!"],
    "water": ["Flows like water!", "Ocean warrior!", "Tidal force!"],
    "grass": ["Nature lover!", "Forest guardian!", "Green power!"],
    "electric": ["Shocking power!", "Lightning fast!", "Electric wonder!"]
}

DEFAULT_DESCRIPTIONS = ["Amazing Pokémon!"]
