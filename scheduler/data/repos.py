from django.contrib.auth import get_user_model
from django.db.models import Prefetch

from studyguides.models import Flashcard
from .models import ReviewState


def user_exists(user_id):
    return get_user_model().objects.filter(pk=user_id).exists()


def flashcard_exists(flashcard_id):
    return Flashcard.objects.filter(pk=flashcard_id).exists()


def get_state_for_update(user_id, flashcard_id):
    """
    Fetch the state row for (user, card) and lock it until the surrounding
    transaction ends. Returns None for a card the user has never reviewed.
    """
    return (ReviewState.objects
            .select_for_update()
            .filter(user_id=user_id, flashcard_id=flashcard_id)
            .first())


def upsert_state(user_id, flashcard_id, rating, result):
    """
    Create or replace the state row keyed on (user, card). A concurrent insert
    of the same pair turns into an update: last writer wins.
    """
    state, _ = ReviewState.objects.update_or_create(
        user_id=user_id, flashcard_id=flashcard_id,
        defaults={
            "rating": int(rating),
            "interval": result.interval,
            "ease_factor": result.ease_factor,
            "repetitions": result.repetitions,
            "next_review_at": result.next_review_at,
        },
    )
    return state


def list_guide_flashcards_with_state(guide_id, user_id):
    """
    Cards of a guide in display order, each with ``user_states`` holding the
    user's state row (empty list if never reviewed).
    """
    return list(
        Flashcard.objects
        .filter(study_guide_id=guide_id)
        .order_by("order", "created_at")
        .prefetch_related(Prefetch(
            "review_states",
            queryset=ReviewState.objects.filter(user_id=user_id),
            to_attr="user_states",
        ))
    )
