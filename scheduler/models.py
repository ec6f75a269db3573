# Django discovers models through <app>.models; the definitions live in data/.
from .data.models import ReviewState  # noqa: F401
