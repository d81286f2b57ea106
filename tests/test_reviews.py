import pytest
from pydantic import ValidationError

from bookwise_api.app.core.errors import Forbidden, NotFound, Unauthorized
from bookwise_api.app.schemas.review import ReviewCreate, ReviewUpdate
from bookwise_api.app.services.statistics_service import StatisticsService


def review_for(book_id="6", user_id="1", rating=3, text="Solid."):
    return ReviewCreate(book_id=book_id, user_id=user_id, rating=rating, review_text=text)


@pytest.mark.asyncio
async def test_new_review_shows_first_and_updates_average(catalog, alice_token):
    review = await catalog.add_review(review_for(book_id="1", rating=3), alice_token)
    assert review.id == "5"
    assert review.user_name == "Alice"

    book = await catalog.get_book_by_id("1")
    assert book.reviews[0].id == review.id
    assert len(book.reviews) == 3
    assert book.average_rating == 4


@pytest.mark.asyncio
async def test_cached_view_matches_refetch(catalog, alice_token):
    cached = await catalog.get_book_by_id("1")
    review = await catalog.add_review(review_for(book_id="1", rating=1), alice_token)
    refreshed = StatisticsService.with_review_added(cached, review)
    fetched = await catalog.get_book_by_id("1")
    assert refreshed.average_rating == fetched.average_rating
    assert [r.id for r in refreshed.reviews] == [r.id for r in fetched.reviews]


@pytest.mark.asyncio
async def test_review_must_be_posted_as_token_owner(catalog, bob_token):
    with pytest.raises(Unauthorized):
        await catalog.add_review(review_for(user_id="1"), bob_token)
    with pytest.raises(Unauthorized):
        await catalog.add_review(review_for(user_id="99"), bob_token)
    assert len(catalog.store.reviews) == 4


@pytest.mark.asyncio
async def test_review_of_missing_book(catalog, alice_token):
    with pytest.raises(NotFound):
        await catalog.add_review(review_for(book_id="99"), alice_token)


@pytest.mark.asyncio
async def test_user_name_is_a_snapshot(catalog, bob_token):
    review = await catalog.add_review(review_for(user_id="2"), bob_token)
    assert review.user_name == "Bob"

    with catalog.store.lock:
        bob = catalog.store.find_user("2")
        index = catalog.store.users.index(bob)
        catalog.store.users[index] = bob.model_copy(update={"name": "Robert"})

    book = await catalog.get_book_by_id("6")
    assert book.reviews[0].user_name == "Bob"


def test_rating_must_be_between_one_and_five():
    for rating in (0, 6):
        with pytest.raises(ValidationError):
            review_for(rating=rating)
    with pytest.raises(ValidationError):
        ReviewUpdate(rating=9, review_text="")


def test_review_update_only_accepts_rating_and_text():
    with pytest.raises(ValidationError):
        ReviewUpdate(rating=3, review_text="", user_id="2")


@pytest.mark.asyncio
async def test_owner_edits_review(catalog, alice_token):
    updated = await catalog.update_review("2", ReviewUpdate(rating=2, review_text="  Meh. "), alice_token)
    assert updated.rating == 2
    assert updated.review_text == "Meh."
    assert updated.book_id == "1"
    assert updated.user_name == "Alice"

    book = await catalog.get_book_by_id("1")
    assert book.average_rating == 3.5


@pytest.mark.asyncio
async def test_edit_by_other_user_is_forbidden(catalog, bob_token):
    with pytest.raises(Forbidden):
        await catalog.update_review("1", ReviewUpdate(rating=1, review_text="x"), bob_token)
    assert catalog.store.find_review("1").rating == 5


@pytest.mark.asyncio
async def test_edit_missing_review(catalog, alice_token):
    with pytest.raises(NotFound):
        await catalog.update_review("99", ReviewUpdate(rating=1, review_text=""), alice_token)


@pytest.mark.asyncio
async def test_owner_deletes_review(catalog, alice_token):
    await catalog.delete_review("4", alice_token)
    book = await catalog.get_book_by_id("5")
    assert book.reviews == []
    assert book.average_rating == 0
    with pytest.raises(NotFound):
        await catalog.delete_review("4", alice_token)


@pytest.mark.asyncio
async def test_delete_by_other_user_is_forbidden(catalog, bob_token):
    with pytest.raises(Forbidden):
        await catalog.delete_review("4", bob_token)
    assert catalog.store.find_review("4") is not None


@pytest.mark.asyncio
async def test_delete_with_bad_token(catalog):
    with pytest.raises(Unauthorized):
        await catalog.delete_review("4", "garbage")
    assert len(catalog.store.reviews) == 4


@pytest.mark.asyncio
async def test_rating_only_edit_keeps_text(catalog, alice_token):
    updated = await catalog.update_review("1", ReviewUpdate(rating=3), alice_token)
    assert updated.rating == 3
    assert updated.review_text == "An absolute classic!"
    assert catalog.store.find_review("1").review_text == "An absolute classic!"


@pytest.mark.asyncio
async def test_text_only_edit_keeps_rating(catalog, alice_token):
    updated = await catalog.update_review("1", ReviewUpdate(review_text="Still great."), alice_token)
    assert updated.rating == 5
    assert updated.review_text == "Still great."
