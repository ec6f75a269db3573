from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler
import structlog

from ..domain.errors import InvalidInput, NotFound, PersistenceFailure

logger = structlog.get_logger()

STATUS_BY_ERROR = {
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    PersistenceFailure: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def api_exception_handler(exc, context):
    """Render scheduler errors and DRF errors as {"error": ...} bodies."""
    for error_cls, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_cls):
            if status_code >= 500:
                logger.error("api_server_error", error=str(exc), exc_info=exc)
            return Response({"error": str(exc)}, status=status_code)

    response = exception_handler(exc, context)
    if response is None:
        return None
    if response.status_code == status.HTTP_400_BAD_REQUEST:
        response.data = {"error": "Invalid request", "details": response.data}
    elif isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"error": response.data["detail"]}
    return response
