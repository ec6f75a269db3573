import pytest

from accounts.models import User
from studyguides.models import Flashcard, StudyGuide


@pytest.fixture
def learner(db):
    return User.objects.create_user("learner", external_uid="uid-learner")


@pytest.fixture
def guide(db):
    return StudyGuide.objects.create(title="Cell Biology Basics")


@pytest.fixture
def cards(guide):
    # Created out of display order on purpose
    fronts = {2: "ribosome", 0: "mitochondrion", 1: "nucleus"}
    created = {
        order: Flashcard.objects.create(
            study_guide=guide, front=front, back=f"about the {front}", order=order
        )
        for order, front in fronts.items()
    }
    return [created[i] for i in sorted(created)]
