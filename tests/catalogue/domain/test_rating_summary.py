"""Tests for the pure rating summary function."""

import pytest
from catalogue.product.rating import RatingSummary, summarize


class TestSummarize:
    def test_mean_of_three_ratings(self):
        assert summarize([4, 5, 3]) == RatingSummary(average_rating=4.0, review_count=3)

    def test_no_ratings_is_zero(self):
        summary = summarize([])
        assert summary.average_rating == 0
        assert summary.review_count == 0

    def test_rounded_to_two_decimals(self):
        assert summarize([5, 4, 4]).average_rating == 4.33
        assert summarize([1, 2]).average_rating == 1.5

    def test_accepts_any_iterable(self):
        assert summarize(r for r in (5, 5)).review_count == 2

    @pytest.mark.parametrize(
        "ratings, average",
        [([1], 1.0), ([2, 3, 5, 5], 3.75), ([1, 1, 1, 2], 1.25), ([5] * 7, 5.0)],
    )
    def test_average_of_ratings(self, ratings, average):
        summary = summarize(ratings)
        assert summary.average_rating == average
        assert summary.review_count == len(ratings)

    @pytest.mark.parametrize(
        "ratings, average",
        [
            ([1] * 7 + [2], 1.13),
            ([1] * 3 + [2] * 5, 1.63),
            ([3] + [2] * 7, 2.13),
            ([3] * 7 + [2], 2.88),
        ],
    )
    def test_ties_round_half_up(self, ratings, average):
        assert summarize(ratings).average_rating == average

    def test_to_dict(self):
        assert summarize([4, 5, 3]).to_dict() == {"average_rating": 4.0, "review_count": 3}
