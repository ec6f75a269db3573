import math
from dataclasses import dataclass
from datetime import datetime

from django.utils import timezone

from .enums import Rating, PASSING_RATING
from .errors import InvalidInput
from ..config import (
    EASE_BONUS,
    FIRST_INTERVAL_DAYS,
    LAPSE_INTERVAL_DAYS,
    MIN_EASE_FACTOR,
    SECOND_INTERVAL_DAYS,
)
from ..utils.time import add_days


@dataclass(frozen=True)
class ScheduleResult:
    interval: int
    ease_factor: float
    repetitions: int
    next_review_at: datetime


def validate_rating(rating) -> Rating:
    try:
        return Rating(rating)
    except ValueError:
        raise InvalidInput(f"rating must be one of 1-4, got {rating!r}") from None


def next_ease_factor(prev_ease: float, rating: int) -> float:
    # Applied on every review, lapses included.
    miss = Rating.EASY - rating
    return max(MIN_EASE_FACTOR, prev_ease + EASE_BONUS - miss * (0.08 + miss * 0.02))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def schedule_next(
    prev_interval: int,
    prev_ease: float,
    prev_repetitions: int,
    rating: int,
    now: datetime = None,
) -> ScheduleResult:
    """
    Compute the next SM-2 state of a card from its previous state and a rating.

    Ratings 1 (again) and 2 (hard) are lapses: the card comes back tomorrow and
    the success streak restarts. Ratings 3 (good) and 4 (easy) step the interval
    1 day, 6 days, then previous interval times the updated ease factor.
    """
    rating = validate_rating(rating)
    ease_factor = next_ease_factor(prev_ease, rating)

    if rating < PASSING_RATING:
        interval = LAPSE_INTERVAL_DAYS
        repetitions = 0
    else:
        if prev_repetitions == 0:
            interval = FIRST_INTERVAL_DAYS
        elif prev_repetitions == 1:
            interval = SECOND_INTERVAL_DAYS
        else:
            interval = round_half_up(prev_interval * ease_factor)
        repetitions = prev_repetitions + 1

    now = now or timezone.now()
    return ScheduleResult(
        interval=interval,
        ease_factor=ease_factor,
        repetitions=repetitions,
        next_review_at=add_days(now, interval),
    )


def is_due(next_review_at, now: datetime) -> bool:
    # Never reviewed (no state) counts as due.
    return next_review_at is None or next_review_at <= now
