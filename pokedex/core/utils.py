import math
import random
import re
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from pokedex.core.constants import (
    MAX_POKEMON_ID, MAX_STAT_VALUE, STAT_ABBREVIATIONS, TYPE_COLORS,
    DEFAULT_TYPE_COLOR, TYPE_DESCRIPTIONS, DEFAULT_DESCRIPTIONS
)
from pokedex.core.errors import InvalidArgument

# Trailing numeric path segment, with or without the closing slash.
# e.g. https://pokeapi.co/api/v2/pokemon/25/ -> 25
REFERENCE_ID_PATTERN = re.compile(r'(?:^|/)(\d+)/?$')

def format_display_name(name: str) -> str:
    """
    Turns an API slug into a display name.
    e.g. great-tusk -> Great Tusk
    """
    if not name:
        return ''
    return ' '.join(word[:1].upper() + word[1:] for word in name.split('-'))

def format_height(decimeters: Union[int, float]) -> str:
    return f"{decimeters / 10:.1f} m"

def format_weight(hectograms: Union[int, float]) -> str:
    return f"{hectograms / 10:.1f} kg"

def extract_id_from_reference(reference: str) -> int:
    """
    Extracts the numeric ID from a resource reference (URL or path).
    Raises InvalidArgument if the reference does not end in a numeric segment.
    """
    match = REFERENCE_ID_PATTERN.search((reference or '').strip())
    if not match:
        raise InvalidArgument(f"No numeric ID in reference: {reference!r}")
    return int(match.group(1))

def abbreviate_stat_name(stat_name: str) -> str:
    return STAT_ABBREVIATIONS.get(stat_name, stat_name.upper())

def is_numeric(value: Any) -> bool:
    if isinstance(value, bool) or value is None:
        return False
    try:
        number = float(str(value).strip())
    except ValueError:
        return False
    return math.isfinite(number)

def is_valid_id(value: Any) -> bool:
    """
    True for integers (or integer strings) in the range of the national dex.
    Floats with a fractional part, booleans and non-numeric input are rejected.
    """
    if isinstance(value, bool) or value is None:
        return False
    if isinstance(value, float):
        if not value.is_integer():
            return False
        value = int(value)
    if isinstance(value, str):
        text = value.strip()
        if not re.fullmatch(r'[+]?\d+', text):
            return False
        value = int(text)
    if not isinstance(value, int):
        return False
    return 1 <= value <= MAX_POKEMON_ID

def stat_percentage(value: Union[int, float], max_value: Union[int, float] = MAX_STAT_VALUE) -> int:
    """Percentage of `value` relative to `max_value`, rounded half up."""
    if max_value is None or max_value <= 0:
        raise InvalidArgument(f"max_value must be greater than 0, got {max_value}")
    return int(math.floor(value / max_value * 100 + 0.5))

def group_by(items: Iterable[Any], key: Union[str, Callable[[Any], Any]]) -> Dict[Any, List[Any]]:
    """
    Groups items by a field name (dict key or attribute) or a key function.
    Groups appear in first-seen order and keep the original item order.
    """
    if callable(key):
        key_fn = key
    else:
        def key_fn(item):
            if isinstance(item, dict):
                return item.get(key)
            return getattr(item, key, None)

    result: Dict[Any, List[Any]] = {}
    for item in items:
        result.setdefault(key_fn(item), []).append(item)
    return result

def capitalize(text: str) -> str:
    if not text:
        return ''
    return text[:1].upper() + text[1:].lower()

def truncate_text(text: Optional[str], max_length: int = 50) -> Optional[str]:
    if not text or len(text) <= max_length:
        return text
    return text[:max_length] + '...'

def format_number(number: int) -> str:
    return f"{number:,}"

def get_type_color(type_name: str) -> str:
    return TYPE_COLORS.get(type_name, DEFAULT_TYPE_COLOR)

def rgb_to_hex(r: int, g: int, b: int) -> str:
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise InvalidArgument(f"RGB channel out of range: {channel}")
    return '#' + ''.join(f'{channel:02x}' for channel in (r, g, b))

def random_description(type_name: str, rng: Optional[random.Random] = None) -> str:
    """Picks a flavour line for the type. Pass `rng` for deterministic output."""
    choices = TYPE_DESCRIPTIONS.get(type_name, DEFAULT_DESCRIPTIONS)
    return (rng or random).choice(choices)
