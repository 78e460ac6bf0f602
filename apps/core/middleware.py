import logging
import time
from django.conf import settings
from django.utils.deprecation import MiddlewareMixin

from .handlers import not_found

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(MiddlewareMixin):
    """
    Logs every request and the response it produced.
    POST bodies are logged too, cut down to REQUEST_LOG_BODY_LIMIT characters.
    """

    def process_request(self, request):
        request._logging_started_at = time.monotonic()
        logger.info(f"{request.method} {request.get_full_path()} - {request.META.get('REMOTE_ADDR')}")

        if request.method == 'POST' and request.body:
            body = request.body.decode('utf-8', errors='replace')
            limit = settings.REQUEST_LOG_BODY_LIMIT
            if len(body) > limit:
                body = body[:limit] + '...'
            logger.info(f"  Body: {body}")

    def process_response(self, request, response):
        started_at = getattr(request, '_logging_started_at', None)
        if started_at is not None:
            duration_ms = round((time.monotonic() - started_at) * 1000)
            logger.info(
                f"{request.method} {request.get_full_path()} - {response.status_code} ({duration_ms}ms)"
            )
        return response


class MethodNotFoundMiddleware(MiddlewareMixin):
    """
    Answers a known path called with an unsupported method the same way as
    an unknown route: a JSON 404 listing the available endpoints.
    """

    def process_response(self, request, response):
        if response.status_code == 405:
            return not_found(request)
        return response
