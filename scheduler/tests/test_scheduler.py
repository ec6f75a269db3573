import pytest
import logging
from django.urls import reverse
from django.utils import timezone
from datetime import timedelta
from unittest import mock
import uuid

from django.db import DatabaseError

from scheduler.data.models import ReviewState

logger = logging.getLogger(__name__)

# Helpers

def make_review(client, flashcard_id, external_user_id, rating):
    url = reverse("review", kwargs={"flashcard_id": str(flashcard_id)})
    payload = {"external_user_id": external_user_id, "rating": rating}
    resp = client.post(url, data=payload, content_type="application/json")
    data = resp.json()
    logger.info(
        "POST /review rating=%s → status=%s progress=%s",
        rating,
        resp.status_code,
        data.get("progress"),
    )
    return resp


def get_due(client, guide_id, external_user_id):
    url = reverse("due-flashcards", kwargs={"guide_id": str(guide_id)})
    params = {} if external_user_id is None else {"external_user_id": external_user_id}
    resp = client.get(url, params)
    data = resp.json()
    logger.info(
        "GET /flashcards/review → status=%s card_count=%s",
        resp.status_code,
        data.get("count"),
    )
    return resp


# Tests

@pytest.mark.django_db
def test_first_review_returns_progress(client, learner, cards):
    resp = make_review(client, cards[0].id, learner.external_uid, 3)
    data = resp.json()

    assert resp.status_code == 200
    assert data["success"] is True
    progress = data["progress"]
    assert progress["flashcard_id"] == str(cards[0].id)
    assert progress["rating"] == 3
    assert progress["rating_label"] == "good"
    assert progress["interval"] == 1
    assert progress["repetitions"] == 1
    assert progress["ease_factor"] == pytest.approx(2.5)
    assert progress["next_review_at"]


@pytest.mark.django_db
def test_review_sequence_grows_then_lapses(client, learner, cards):
    card_id = cards[0].id
    progress = [
        make_review(client, card_id, learner.external_uid, r).json()["progress"]
        for r in (3, 3, 4, 1)
    ]

    assert [p["interval"] for p in progress] == [1, 6, 16, 1]
    assert [p["repetitions"] for p in progress] == [1, 2, 3, 0]
    assert progress[2]["ease_factor"] == pytest.approx(2.6)
    assert progress[3]["ease_factor"] == pytest.approx(2.28)
    assert progress[3]["rating_label"] == "again"
    assert ReviewState.objects.filter(flashcard_id=card_id).count() == 1


@pytest.mark.django_db
@pytest.mark.parametrize("rating", [0, 5, "easy"])
def test_invalid_rating_is_400(client, learner, cards, rating):
    resp = make_review(client, cards[0].id, learner.external_uid, rating)

    assert resp.status_code == 400
    assert "rating" in resp.json()["details"]
    assert not ReviewState.objects.exists()


@pytest.mark.django_db
def test_missing_external_user_id_is_400(client, cards):
    url = reverse("review", kwargs={"flashcard_id": str(cards[0].id)})
    resp = client.post(url, data={"rating": 3}, content_type="application/json")

    assert resp.status_code == 400
    assert "external_user_id" in resp.json()["details"]


@pytest.mark.django_db
def test_unknown_user_is_404(client, cards):
    resp = make_review(client, cards[0].id, "uid-nobody", 3)

    assert resp.status_code == 404
    assert resp.json() == {"error": "User not found"}


@pytest.mark.django_db
def test_unknown_flashcard_is_404(client, learner):
    resp = make_review(client, uuid.uuid4(), learner.external_uid, 3)

    assert resp.status_code == 404
    assert resp.json() == {"error": "Flashcard not found"}


@pytest.mark.django_db
def test_persistence_failure_is_500(client, learner, cards):
    with mock.patch(
        "scheduler.services.reviews.upsert_state",
        side_effect=DatabaseError("database is locked"),
    ):
        resp = make_review(client, cards[0].id, learner.external_uid, 3)

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to record review"}


@pytest.mark.django_db
def test_due_flashcards_unseen_all_due(client, learner, guide, cards):
    resp = get_due(client, guide.id, learner.external_uid)
    data = resp.json()

    assert resp.status_code == 200
    assert data["count"] == 3
    assert [c["id"] for c in data["cards"]] == [str(c.id) for c in cards]


@pytest.mark.django_db
def test_due_flashcards_excludes_reviewed_future_cards(client, learner, guide, cards):
    make_review(client, cards[1].id, learner.external_uid, 4)

    data = get_due(client, guide.id, learner.external_uid).json()
    assert [c["id"] for c in data["cards"]] == [str(cards[0].id), str(cards[2].id)]


@pytest.mark.django_db
def test_due_flashcards_includes_overdue_cards(client, learner, guide, cards):
    make_review(client, cards[1].id, learner.external_uid, 4)
    ReviewState.objects.filter(flashcard=cards[1]).update(
        next_review_at=timezone.now() - timedelta(minutes=1)
    )

    data = get_due(client, guide.id, learner.external_uid).json()
    assert data["count"] == 3


@pytest.mark.django_db
def test_due_flashcards_expose_content_only(client, learner, guide, cards):
    make_review(client, cards[0].id, learner.external_uid, 1)
    ReviewState.objects.update(next_review_at=timezone.now() - timedelta(days=1))

    card = get_due(client, guide.id, learner.external_uid).json()["cards"][0]
    assert set(card) == {"id", "study_guide_id", "front", "back", "difficulty", "tags", "order"}
    assert card["study_guide_id"] == str(guide.id)


@pytest.mark.django_db
def test_due_flashcards_none_due_is_empty_list(client, learner, guide, cards):
    for card in cards:
        make_review(client, card.id, learner.external_uid, 3)

    resp = get_due(client, guide.id, learner.external_uid)
    assert resp.status_code == 200
    assert resp.json()["cards"] == []


@pytest.mark.django_db
def test_due_flashcards_requires_external_user_id(client, guide):
    resp = get_due(client, guide.id, None)
    assert resp.status_code == 400


@pytest.mark.django_db
def test_due_flashcards_unknown_user_is_404(client, guide, cards):
    resp = get_due(client, guide.id, "uid-nobody")
    assert resp.status_code == 404
    assert resp.json() == {"error": "User not found"}
