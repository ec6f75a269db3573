from django.conf import settings
from django.db import models
from django.utils import timezone

from ..config import DEFAULT_EASE_FACTOR, DEFAULT_INTERVAL_DAYS, DEFAULT_REPETITIONS
from ..domain.enums import Rating


class ReviewState(models.Model):
    """Rolled-up scheduling state of one flashcard for one user."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="review_states"
    )
    flashcard = models.ForeignKey(
        "studyguides.Flashcard", on_delete=models.CASCADE, related_name="review_states"
    )
    rating = models.PositiveSmallIntegerField(
        choices=[(r.value, r.name.lower()) for r in Rating]
    )
    interval = models.PositiveIntegerField(default=DEFAULT_INTERVAL_DAYS)  # days
    ease_factor = models.FloatField(default=DEFAULT_EASE_FACTOR)
    repetitions = models.PositiveIntegerField(default=DEFAULT_REPETITIONS)
    next_review_at = models.DateTimeField(default=timezone.now)  # UTC
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "scheduler"
        constraints = [
            models.UniqueConstraint(
                fields=["user", "flashcard"], name="unique_review_state_per_user_card"
            ),
        ]
        indexes = [
            models.Index(fields=["user", "next_review_at"], name="review_user_next_idx"),
        ]

    def __str__(self):
        return f"{self.user_id}:{self.flashcard_id} due {self.next_review_at:%Y-%m-%d}"
