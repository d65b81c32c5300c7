import math
from dataclasses import dataclass, field
from typing import List

from pokedex.core.constants import DEFAULT_BLOCK_SIZE
from pokedex.core.errors import InvalidArgument

@dataclass(frozen=True)
class PageWindow:
    visible_pages: List[int] = field(default_factory=list)
    show_first: bool = False
    show_prev: bool = False
    show_next: bool = False
    show_last: bool = False
    show_left_ellipsis: bool = False
    show_right_ellipsis: bool = False

    @property
    def has_controls(self) -> bool:
        """False when there is nothing to navigate (zero or one page)."""
        return self.show_prev or self.show_next

def page_range(start: int, end: int) -> List[int]:
    """Inclusive range of page numbers."""
    return list(range(start, end + 1))

def total_pages_for(total_items: int, page_size: int) -> int:
    if page_size <= 0:
        raise InvalidArgument(f"page_size must be greater than 0, got {page_size}")
    return math.ceil(total_items / page_size) if total_items > 0 else 0

def compute_window(current_page: int, total_pages: int, block_size: int = DEFAULT_BLOCK_SIZE) -> PageWindow:
    """
    Computes which page buttons are shown.

    Pages are split into contiguous blocks of `block_size`; only the block that
    holds the current page is visible. Ellipses mark hidden blocks on either side.
    """
    if block_size <= 0:
        raise InvalidArgument(f"block_size must be greater than 0, got {block_size}")
    if total_pages < 0:
        raise InvalidArgument(f"total_pages cannot be negative, got {total_pages}")

    if total_pages == 0:
        return PageWindow()

    if not 1 <= current_page <= total_pages:
        raise InvalidArgument(f"Page {current_page} is outside 1..{total_pages}")

    current_block = math.ceil(current_page / block_size)
    total_blocks = math.ceil(total_pages / block_size)

    first_visible = (current_block - 1) * block_size + 1
    last_visible = min(current_block * block_size, total_pages)

    return PageWindow(
        visible_pages=page_range(first_visible, last_visible),
        show_first=current_page > 1,
        show_prev=current_page > 1,
        show_next=current_page < total_pages,
        show_last=current_page < total_pages,
        show_left_ellipsis=current_block > 1,
        show_right_ellipsis=current_block < total_blocks,
    )

class Paginator:
    """
    Navigation transitions for a page bar. Every method only returns the target
    page number; the caller owns the page state.
    """
    def __init__(self, total_pages: int, current_page: int = 1):
        if total_pages < 0:
            raise InvalidArgument(f"total_pages cannot be negative, got {total_pages}")
        self.total_pages = total_pages
        self.current_page = current_page

    def first(self) -> int:
        return 1

    def last(self) -> int:
        return self.total_pages

    def prev(self) -> int:
        return max(1, self.current_page - 1)

    def next(self) -> int:
        return min(self.total_pages, self.current_page + 1)

    def go_to(self, page: int) -> int:
        # Out of range requests are caller bugs, so they are rejected instead of clamped
        if isinstance(page, bool) or not isinstance(page, int):
            raise InvalidArgument(f"Page must be an integer, got {page!r}")
        if not 1 <= page <= self.total_pages:
            raise InvalidArgument(f"Page {page} is outside 1..{self.total_pages}")
        return page

    def window(self, block_size: int = DEFAULT_BLOCK_SIZE) -> PageWindow:
        return compute_window(self.current_page, self.total_pages, block_size)
