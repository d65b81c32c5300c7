from typing import List, Optional, Literal, Dict, Any
from pydantic import BaseModel, Field, model_validator
from pokedex.core.constants import DEFAULT_PAGE_SIZE
from pokedex.core.utils import extract_id_from_reference, capitalize, format_display_name

# --- API Models ---

class NamedResource(BaseModel):
    name: str
    url: str = ""

    model_config = {"frozen": True}

    @property
    def id(self) -> Optional[int]:
        """Numeric ID taken from the trailing segment of the resource URL."""
        if not self.url:
            return None
        try:
            return extract_id_from_reference(self.url)
        except ValueError:
            return None

class PokemonTypeSlot(BaseModel):
    slot: int = 1
    type: NamedResource

    model_config = {"frozen": True}

class PokemonStat(BaseModel):
    base_stat: int
    effort: int = 0
    stat: NamedResource

    model_config = {"frozen": True}

class PokemonAbility(BaseModel):
    ability: NamedResource
    is_hidden: bool = False
    slot: int = 1

    model_config = {"frozen": True}

class PokemonMove(BaseModel):
    move: NamedResource

    model_config = {"frozen": True}

class Pokemon(BaseModel):
    id: int
    name: str
    height: int = 0  # decimetres
    weight: int = 0  # hectograms
    types: List[PokemonTypeSlot] = []
    stats: List[PokemonStat] = []
    abilities: List[PokemonAbility] = []
    moves: List[PokemonMove] = []
    sprites: Dict[str, Any] = {}

    model_config = {"frozen": True}

    @property
    def type_names(self) -> List[str]:
        return [t.type.name for t in sorted(self.types, key=lambda t: t.slot)]

    @property
    def primary_type(self) -> str:
        names = self.type_names
        return names[0] if names else "normal"

    @property
    def move_names(self) -> List[str]:
        return [m.move.name for m in self.moves]

    @property
    def display_name(self) -> str:
        return format_display_name(self.name)

    @property
    def image_url(self) -> Optional[str]:
        """
        Official artwork if the API has it, otherwise the default front sprite.
        """
        other = self.sprites.get("other") or {}
        artwork = (other.get("official-artwork") or {}).get("front_default")
        if artwork:
            return artwork
        return self.sprites.get("front_default")

class Category(BaseModel):
    name: str
    url: str = ""

    model_config = {"frozen": True}

    @property
    def id(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return capitalize(self.name)

# --- View State Models ---

class PageState(BaseModel):
    current_page: int = Field(1, ge=1)
    page_size: int = Field(DEFAULT_PAGE_SIZE, gt=0)
    total_items: int = Field(0, ge=0)

    model_config = {"frozen": True}

    @model_validator(mode='before')
    @classmethod
    def _clamp_page(cls, data: Any) -> Any:
        # Keep current_page inside [1, total_pages]; an empty collection always sits on page 1
        if not isinstance(data, dict):
            return data
        page = data.get('current_page', 1)
        size = data.get('page_size', DEFAULT_PAGE_SIZE)
        total = data.get('total_items', 0)
        if not isinstance(page, int) or not isinstance(size, int) or not isinstance(total, int):
            return data
        if size <= 0 or total < 0:
            return data
        pages = (total + size - 1) // size
        if pages == 0:
            page = 1
        else:
            page = max(1, min(page, pages))
        return {**data, 'current_page': page}

    @property
    def total_pages(self) -> int:
        return (self.total_items + self.page_size - 1) // self.page_size

    def with_page(self, page: int) -> "PageState":
        return PageState(current_page=page, page_size=self.page_size, total_items=self.total_items)

    def with_total(self, total_items: int) -> "PageState":
        return PageState(current_page=self.current_page, page_size=self.page_size, total_items=total_items)

    def slice(self, items: List[Any]) -> List[Any]:
        start = (self.current_page - 1) * self.page_size
        return list(items[start:start + self.page_size])

class SearchState(BaseModel):
    query: str = ""
    sort_order: Literal["asc", "desc"] = "asc"

    model_config = {"frozen": True}

    def toggled(self) -> "SearchState":
        return SearchState(query=self.query, sort_order="desc" if self.sort_order == "asc" else "asc")

    def with_query(self, query: str) -> "SearchState":
        return SearchState(query=query or "", sort_order=self.sort_order)
