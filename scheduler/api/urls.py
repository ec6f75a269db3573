from django.urls import path
from .views import ReviewView, DueFlashcardsView

urlpatterns = [
    path(
        "flashcards/<uuid:flashcard_id>/review",
        ReviewView.as_view(),
        name="review",
    ),
    path(
        "<uuid:guide_id>/flashcards/review",
        DueFlashcardsView.as_view(),
        name="due-flashcards",
    ),
]
