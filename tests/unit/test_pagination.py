"""
Unit tests for PaginatedResult page-link computation.
"""
from user_backend.domain.models.pagination import PaginatedResult


class TestPaginatedResultBuild:

    def test_first_page_of_twelve(self):
        result = PaginatedResult.build(items=list(range(5)), count=12, page=1, limit=5)
        assert len(result.items) == 5
        assert result.total_pages == 3
        assert result.current_page == 1
        assert result.previous_page is None
        assert result.next_page == 2

    def test_last_page_of_twelve(self):
        result = PaginatedResult.build(items=[10, 11], count=12, page=3, limit=5)
        assert result.total_pages == 3
        assert result.previous_page == 2
        assert result.next_page is None

    def test_empty_store(self):
        result = PaginatedResult.build(items=[], count=0, page=1, limit=5)
        assert result.total_pages == 0
        assert result.previous_page is None
        assert result.next_page is None

    def test_exact_multiple(self):
        result = PaginatedResult.build(items=list(range(5)), count=10, page=2, limit=5)
        assert result.total_pages == 2
        assert result.next_page is None
