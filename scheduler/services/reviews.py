from django.db import DatabaseError, transaction
from django.utils import timezone
import structlog
from ..config import DEFAULT_EASE_FACTOR, DEFAULT_INTERVAL_DAYS, DEFAULT_REPETITIONS
from ..data.repos import (
    flashcard_exists,
    get_state_for_update,
    list_guide_flashcards_with_state,
    upsert_state,
    user_exists,
)
from ..domain.errors import NotFound, PersistenceFailure
from ..domain.logic import is_due, schedule_next, validate_rating
from ..utils.time import to_utc_iso

logger = structlog.get_logger()

def record_review(user_id, flashcard_id, rating, now=None):
    rating = validate_rating(rating)
    logger.info("review_received",
        user_id=str(user_id),
        flashcard_id=str(flashcard_id),
        rating=int(rating),
    )

    try:
        if not user_exists(user_id):
            raise NotFound("User not found")
        if not flashcard_exists(flashcard_id):
            raise NotFound("Flashcard not found")

        # Read, compute and upsert under one transaction and row lock
        with transaction.atomic():
            prior = get_state_for_update(user_id, flashcard_id)
            is_first = prior is None
            result = schedule_next(
                DEFAULT_INTERVAL_DAYS if is_first else prior.interval,
                DEFAULT_EASE_FACTOR if is_first else prior.ease_factor,
                DEFAULT_REPETITIONS if is_first else prior.repetitions,
                rating,
                now=now,
            )
            state = upsert_state(user_id, flashcard_id, rating, result)
    except DatabaseError as exc:
        logger.error("review_persist_failed",
            user_id=str(user_id),
            flashcard_id=str(flashcard_id),
            error=str(exc),
        )
        raise PersistenceFailure("Failed to record review") from exc

    logger.info("review_scheduled",
        user_id=str(user_id),
        flashcard_id=str(flashcard_id),
        first_review=is_first,
        interval_days=state.interval,
        ease_factor=state.ease_factor,
        repetitions=state.repetitions,
        next_review_utc=to_utc_iso(state.next_review_at),
    )
    return state


def get_due_flashcards(guide_id, user_id, now=None):
    """
    Flashcards of a guide that the user should review now, in display order.
    Unreviewed cards are always due.
    """
    try:
        if not user_exists(user_id):
            raise NotFound("User not found")
        cards = list_guide_flashcards_with_state(guide_id, user_id)
    except DatabaseError as exc:
        logger.error("due_lookup_failed",
            guide_id=str(guide_id),
            user_id=str(user_id),
            error=str(exc),
        )
        raise PersistenceFailure("Failed to fetch review queue") from exc

    now = now or timezone.now()
    due = []
    for card in cards:
        states = card.user_states
        del card.user_states  # callers only see card content
        if is_due(states[0].next_review_at if states else None, now):
            due.append(card)

    logger.info("due_flashcards_selected",
        guide_id=str(guide_id),
        user_id=str(user_id),
        total_cards=len(cards),
        due_cards=len(due),
        now_utc=to_utc_iso(now),
    )
    return due
