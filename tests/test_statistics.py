import pytest

from bookwise_api.app.core.latency import simulate_delay
from bookwise_api.app.schemas.book import BookWithReviews
from bookwise_api.app.schemas.review import ReviewRead
from bookwise_api.app.services.statistics_service import StatisticsService


def make_review(review_id, rating, book_id="1"):
    return ReviewRead(
        id=review_id,
        book_id=book_id,
        user_id="1",
        rating=rating,
        review_text="",
        user_name="Alice",
    )


def test_average_of_no_reviews_is_zero():
    assert StatisticsService.average_rating([]) == 0
    stats = StatisticsService.compute_stats([])
    assert stats.average_rating == 0
    assert stats.count == 0


def test_average_is_arithmetic_mean():
    reviews = [make_review("1", 5), make_review("2", 4), make_review("3", 3)]
    assert StatisticsService.average_rating(reviews) == 4
    assert StatisticsService.compute_stats(reviews).count == 3


def test_average_does_not_depend_on_order():
    reviews = [make_review("1", 5), make_review("2", 2), make_review("3", 4), make_review("4", 1)]
    assert StatisticsService.average_rating(reviews) == StatisticsService.average_rating(reversed(reviews))
    assert StatisticsService.average_rating(reviews) == 3


def test_rating_distribution_covers_every_star():
    reviews = [make_review("1", 5), make_review("2", 5), make_review("3", 1)]
    assert StatisticsService.rating_distribution(reviews) == {1: 1, 2: 0, 3: 0, 4: 0, 5: 2}
    assert StatisticsService.rating_distribution([]) == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}


def _view(reviews):
    return BookWithReviews(
        id="1",
        title="The Hobbit",
        author="J.R.R. Tolkien",
        year=1937,
        added_by="1",
        reviews=reviews,
        average_rating=StatisticsService.average_rating(reviews),
    )


def test_view_refresh_after_adding_review():
    view = _view([make_review("1", 4)])
    refreshed = StatisticsService.with_review_added(view, make_review("2", 2))
    assert [r.id for r in refreshed.reviews] == ["2", "1"]
    assert refreshed.average_rating == 3
    # The original view is left alone
    assert len(view.reviews) == 1
    assert view.average_rating == 4


def test_view_refresh_ignores_review_of_other_book():
    view = _view([make_review("1", 4)])
    refreshed = StatisticsService.with_review_added(view, make_review("2", 1, book_id="9"))
    assert [r.id for r in refreshed.reviews] == ["1"]
    assert refreshed.average_rating == 4


def test_view_refresh_after_editing_and_removing_review():
    view = _view([make_review("1", 4), make_review("2", 2)])
    edited = StatisticsService.with_review_replaced(view, make_review("2", 5))
    assert edited.average_rating == 4.5
    removed = StatisticsService.with_review_removed(edited, "1")
    assert [r.id for r in removed.reviews] == ["2"]
    assert removed.average_rating == 5
    emptied = StatisticsService.with_review_removed(removed, "2")
    assert emptied.reviews == []
    assert emptied.average_rating == 0


@pytest.mark.asyncio
async def test_simulate_delay_returns_data():
    payload = {"books": []}
    assert await simulate_delay(payload, 5) is payload
    assert await simulate_delay(None, 0) is None


def test_view_refresh_does_not_duplicate_known_review():
    view = _view([make_review("1", 4)])
    once = StatisticsService.with_review_added(view, make_review("2", 2))
    twice = StatisticsService.with_review_added(once, make_review("2", 2))
    assert [r.id for r in twice.reviews] == ["2", "1"]
    assert twice.average_rating == 3
