"""Pagination — pure offset math and previous/next link construction.

Invariants:
    - Pages are zero-based; offset = page * limit
    - previous is None on page 0
    - next is None once (page + 1) * limit reaches the total count
    - Links keep every other query parameter of the request URL
"""

from starlette.datastructures import URL


def page_offset(page: int, limit: int) -> int:
    return page * limit


def build_page_links(limit: int, total: int, page: int, url: URL) -> dict[str, str | None]:
    """Build {previous, next} page links for the given request URL."""
    previous = (
        str(url.include_query_params(page=page - 1)) if page > 0 else None
    )
    has_next = (page + 1) * limit < total
    next_ = str(url.include_query_params(page=page + 1)) if has_next else None
    return {"previous": previous, "next": next_}
