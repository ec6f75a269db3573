from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from accounts.services import resolve_user_id
from ..services.reviews import get_due_flashcards, record_review
from ..utils.time import to_utc_iso
from .serializers import (
    DueQuerySerializer,
    FlashcardSerializer,
    ReviewInSerializer,
    ReviewStateSerializer,
)

base_logger = structlog.get_logger()


class ReviewView(views.APIView):
    def post(self, request, flashcard_id):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        external_uid = s.validated_data["external_user_id"]
        rating = s.validated_data["rating"]

        user_id = resolve_user_id(external_uid)
        state = record_review(user_id, flashcard_id, rating)

        logger.info(
            "review_api_response",
            user_id=str(user_id),
            flashcard_id=str(flashcard_id),
            rating=rating,
            interval_days=state.interval,
            repetitions=state.repetitions,
            next_review_utc=to_utc_iso(state.next_review_at),
        )

        return Response(
            {"success": True, "progress": ReviewStateSerializer(state).data},
            status=status.HTTP_200_OK,
        )


class DueFlashcardsView(views.APIView):
    def get(self, request, guide_id):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)

        user_id = resolve_user_id(qs.validated_data["external_user_id"])
        cards = get_due_flashcards(guide_id, user_id)

        logger.info(
            "due_flashcards_api_response",
            guide_id=str(guide_id),
            user_id=str(user_id),
            card_count=len(cards),
        )

        return Response(
            {
                "success": True,
                "guide_id": str(guide_id),
                "count": len(cards),
                "cards": FlashcardSerializer(cards, many=True).data,
            }
        )
