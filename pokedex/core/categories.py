from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from pokedex.core.constants import ALL_CATEGORIES
from pokedex.core.models import PageState

@dataclass(frozen=True)
class SourceSpec:
    """Which remote collection a list view should request."""
    endpoint_kind: Literal["full", "byCategory"]
    ref: Optional[str] = None

    @property
    def is_full(self) -> bool:
        return self.endpoint_kind == "full"

def resolve_source(category_id: Optional[str]) -> SourceSpec:
    """
    Maps the selected type to a collection source.
    The "All" sentinel (or no selection) requests the full catalog.
    """
    if not category_id or category_id == ALL_CATEGORIES:
        return SourceSpec("full", None)
    return SourceSpec("byCategory", category_id)

def switch_category(page_state: PageState, category_id: Optional[str]) -> Tuple[SourceSpec, PageState]:
    """
    Resolves the new source and returns a fresh page state on page 1.
    The item count is unknown until the new collection is fetched.
    """
    fresh_state = PageState(current_page=1, page_size=page_state.page_size, total_items=0)
    return resolve_source(category_id), fresh_state
