from typing import Optional


def normalize_page(page: Optional[int]) -> int:
    """
    Resolve the 1-based page number; a missing page or page 0 means page 1
    """
    return page if page and page > 0 else 1

def get_total_pages(total: int, size: int) -> int:
    """
    Number of pages needed for `total` items, 0 when there are no items
    """
    return (total + size - 1) // size  # Ceiling division

def get_offset(page: int, size: int) -> int:
    """
    Calculate offset for pagination
    """
    return (page - 1) * size
