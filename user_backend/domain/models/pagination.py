import math
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class PaginatedResult(Generic[T]):
    """One page of results plus the page links around it"""
    items: List[T] = field(default_factory=list)
    total_pages: int = 0
    current_page: int = 1
    previous_page: Optional[int] = None
    next_page: Optional[int] = None

    @classmethod
    def build(cls, items: List[T], count: int, page: int, limit: int) -> "PaginatedResult[T]":
        """
        Build a page from the total match count

        Args:
            items: Records on the requested page
            count: Total number of records matching the filter
            page: 1-based page number that was requested
            limit: Page size

        Returns:
            PaginatedResult with computed page links
        """
        total_pages = math.ceil(count / limit) if limit > 0 else 0
        return cls(
            items=items,
            total_pages=total_pages,
            current_page=page,
            previous_page=page - 1 if page - 1 > 0 else None,
            next_page=page + 1 if page + 1 <= total_pages else None,
        )
