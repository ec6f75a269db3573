import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Platform user. Requests identify the user by ``external_uid`` (the id
    issued by the identity provider); everything else refers to ``id``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    external_uid = models.CharField(max_length=128, unique=True)
