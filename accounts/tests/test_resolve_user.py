import pytest
from django.contrib.auth import get_user_model

from accounts.services import resolve_user_id
from scheduler.domain.errors import NotFound

User = get_user_model()


@pytest.mark.django_db
class TestResolveUserId:
    def setup_method(self):
        self.user = User.objects.create_user("testuser", external_uid="uid-testuser")

    def test_resolves_external_uid_to_internal_id(self):
        assert resolve_user_id("uid-testuser") == self.user.id

    def test_unknown_uid_raises_not_found(self):
        with pytest.raises(NotFound):
            resolve_user_id("uid-nobody")

    def test_username_is_not_an_external_uid(self):
        with pytest.raises(NotFound):
            resolve_user_id("testuser")
