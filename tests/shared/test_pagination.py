import pytest
from protean.exceptions import ValidationError
from shared.pagination import calculate_pagination, paginate_list


class TestCalculatePagination:
    def test_missing_values_mean_no_pagination(self):
        assert calculate_pagination() is None
        assert calculate_pagination(page=2) is None
        assert calculate_pagination(limit=10) is None

    def test_offset_from_page(self):
        assert calculate_pagination(1, 10) == (0, 10)
        assert calculate_pagination(3, 10) == (20, 10)

    def test_string_values_accepted(self):
        assert calculate_pagination("2", "5") == (5, 5)

    @pytest.mark.parametrize("page, limit", [(0, 10), (1, 0), (-1, 5)])
    def test_non_positive_values_rejected(self, page, limit):
        with pytest.raises(ValidationError):
            calculate_pagination(page, limit)


class TestPaginateList:
    def test_window_and_meta(self):
        items, meta = paginate_list(list(range(5)), page=2, limit=2)
        assert items == [2, 3]
        assert meta == {"page": 2, "limit": 2, "total": 5}

    def test_no_pagination_returns_everything(self):
        assert paginate_list([1, 2]) == ([1, 2], {"total": 2})

    def test_page_past_the_end_is_empty(self):
        assert paginate_list([1, 2], page=3, limit=2)[0] == []
