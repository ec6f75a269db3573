from rest_framework import serializers

from studyguides.models import Flashcard
from ..data.models import ReviewState
from ..domain.enums import Rating, RATING_LABELS

class ReviewInSerializer(serializers.Serializer):
    external_user_id = serializers.CharField(max_length=128)
    rating = serializers.IntegerField(min_value=int(Rating.AGAIN), max_value=int(Rating.EASY))

class DueQuerySerializer(serializers.Serializer):
    external_user_id = serializers.CharField(max_length=128)

class ReviewStateSerializer(serializers.ModelSerializer):
    flashcard_id = serializers.UUIDField(read_only=True)
    rating_label = serializers.SerializerMethodField()

    class Meta:
        model = ReviewState
        fields = [
            "flashcard_id",
            "rating",
            "rating_label",
            "interval",
            "ease_factor",
            "repetitions",
            "next_review_at",
            "updated_at",
        ]

    def get_rating_label(self, obj):
        return RATING_LABELS[Rating(obj.rating)]

class FlashcardSerializer(serializers.ModelSerializer):
    """Card content only; scheduling state is never exposed here."""

    study_guide_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Flashcard
        fields = ["id", "study_guide_id", "front", "back", "difficulty", "tags", "order"]
