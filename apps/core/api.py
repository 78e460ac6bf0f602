"""
API Router for Core app.
Service health and discovery endpoints; no dependency on the sort engine's
ordering rules.
"""
import time
from datetime import datetime, timezone
from typing import Dict, List

from django.conf import settings
from django.http import HttpRequest
from ninja import Router, Schema

from apps.sorting.strategies import list_strategies

router = Router(tags=["Core"])

STARTED_AT = time.monotonic()

ENDPOINTS: Dict[str, str] = {
    'POST /sort': 'Sort todos by strategy',
    'GET /sort/strategies': 'List supported sorting strategies',
    'GET /health': 'Service health check',
}


class HealthOut(Schema):
    status: str
    service: str
    version: str
    timestamp: datetime
    uptime: float


class ServiceInfoOut(Schema):
    service: str
    version: str
    description: str
    endpoints: Dict[str, str]
    supportedStrategies: List[str]


@router.get("/health", response=HealthOut)
def health(request: HttpRequest):
    return HealthOut(
        status="OK",
        service=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        timestamp=datetime.now(timezone.utc),
        uptime=time.monotonic() - STARTED_AT,
    )


@router.get("/", response=ServiceInfoOut)
def service_info(request: HttpRequest):
    """Describe the service and the sorting strategies it supports."""
    return ServiceInfoOut(
        service="Todo Sorting Service",
        version=settings.SERVICE_VERSION,
        description="Microservice for sorting todo items with various strategies",
        endpoints=ENDPOINTS,
        supportedStrategies=list_strategies(),
    )
