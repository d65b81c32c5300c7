import unicodedata
from functools import cmp_to_key
from typing import Any, Callable, List, Sequence

from pokedex.core.errors import InvalidArgument

SORT_ORDERS = ("asc", "desc")

def fold_text(text: str) -> str:
    """Casefolded text with accents stripped, so "Élan" sorts next to "elan"."""
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    return "".join(c for c in decomposed if not unicodedata.combining(c))

def compare_text(a: str, b: str) -> int:
    """
    Dictionary-style comparison that does not depend on the process locale.
    Accents and case are ignored first; the casefolded and then the raw
    strings only break ties.
    """
    left = (fold_text(a), a.casefold(), a)
    right = (fold_text(b), b.casefold(), b)
    return (left > right) - (left < right)

def filter_and_sort(items: Sequence[Any], query: str, sort_order: str, key: Callable[[Any], str]) -> List[Any]:
    """
    Returns the items whose key contains `query` (case-insensitive), sorted by key.

    "desc" negates the comparison rather than reversing the result, so equal keys
    keep their original relative order in both directions. The input is not modified.
    """
    if sort_order not in SORT_ORDERS:
        raise InvalidArgument(f"Unknown sort order: {sort_order!r}")

    term = (query or '').strip().casefold()
    if term:
        result = [item for item in items if term in (key(item) or '').casefold()]
    else:
        result = list(items)

    sign = 1 if sort_order == "asc" else -1

    def comparator(a, b):
        return sign * compare_text(key(a) or '', key(b) or '')

    # list.sort is stable
    result.sort(key=cmp_to_key(comparator))
    return result

def filter_records(records: Sequence[Any], search_term: str) -> List[Any]:
    """Matches on name or ID substring. An empty term returns everything."""
    if not search_term:
        return list(records)

    term = search_term.strip().lower()

    def matches(record):
        return term in record.name.lower() or term in str(record.id)

    return [r for r in records if matches(r)]

def sort_records(records: Sequence[Any], sort_by: str = "id") -> List[Any]:
    """
    Sorts by id (ascending), name (accent and case insensitive) or height/weight (largest first).
    Unknown criteria return an unsorted copy.
    """
    if not records:
        return []

    result = list(records)
    if sort_by == "id":
        result.sort(key=lambda r: r.id)
    elif sort_by == "name":
        result.sort(key=cmp_to_key(lambda a, b: compare_text(a.name, b.name)))
    elif sort_by == "height":
        result.sort(key=lambda r: r.height, reverse=True)
    elif sort_by == "weight":
        result.sort(key=lambda r: r.weight, reverse=True)
    return result
