"""
Error responses shared by the whole API.

Every error body carries a short machine-readable `error` and a
human-readable `message`, matching the sorting endpoints.
"""
import logging
from http import HTTPStatus

from django.http import HttpRequest, JsonResponse
from ninja import NinjaAPI
from ninja.errors import HttpError, ValidationError

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    'POST /sort',
    'GET /sort/strategies',
    'GET /health',
    'GET /',
]


def register_exception_handlers(api: NinjaAPI) -> None:
    """Attach the service-wide exception handlers to a NinjaAPI instance."""

    @api.exception_handler(ValidationError)
    def validation_error(request: HttpRequest, exc: ValidationError):
        return api.create_response(
            request,
            {"error": "Invalid request body", "message": _format_errors(exc.errors)},
            status=400,
        )

    @api.exception_handler(HttpError)
    def http_error(request: HttpRequest, exc: HttpError):
        return api.create_response(
            request,
            {"error": HTTPStatus(exc.status_code).phrase, "message": str(exc)},
            status=exc.status_code,
        )

    @api.exception_handler(Exception)
    def unhandled_error(request: HttpRequest, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.path}")
        return api.create_response(
            request,
            {"error": "Internal Server Error", "message": "Something went wrong on our end"},
            status=500,
        )


def _format_errors(errors) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(p) for p in error.get("loc", ()) if p not in ("body", "payload"))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Request body could not be parsed"


def not_found(request: HttpRequest, *args, **kwargs) -> JsonResponse:
    """Catch-all view for routes the API does not serve."""
    return JsonResponse(
        {
            "error": "Not Found",
            "message": f"Route {request.method} {request.path} not found",
            "availableEndpoints": AVAILABLE_ENDPOINTS,
        },
        status=404,
    )
