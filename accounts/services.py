import structlog

from scheduler.domain.errors import NotFound

from .models import User

logger = structlog.get_logger()


def resolve_user_id(external_uid):
    """Map an identity-provider uid to the internal user id."""
    user_id = (
        User.objects.filter(external_uid=external_uid)
        .values_list("id", flat=True)
        .first()
    )
    if user_id is None:
        logger.info("user_not_found", external_uid=external_uid)
        raise NotFound("User not found")
    return user_id

