"""Page/limit clamping and windowed queries."""
import math
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy.orm import Query

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 50

T = TypeVar("T")


def _parse_positive(raw: Any, default: int) -> int:
    """Parse a query value; missing, non-numeric or zero falls back to ``default``."""
    if raw is None:
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value or default


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int

    @classmethod
    def from_query(cls, page: Optional[Any] = None, limit: Optional[Any] = None) -> "PageRequest":
        return cls(
            page=max(1, _parse_positive(page, DEFAULT_PAGE)),
            limit=min(MAX_LIMIT, max(1, _parse_positive(limit, DEFAULT_LIMIT))),
        )

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    limit: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.limit) if self.total_count else 0


def paginate(query: Query, request: PageRequest) -> Page:
    """Count the full query, then fetch one window of it.

    ``query`` must already carry its ordering.
    """
    total = query.order_by(None).count()
    items = query.offset(request.skip).limit(request.limit).all()
    return Page(items=items, page=request.page, limit=request.limit, total_count=total)
