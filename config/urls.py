"""
URL configuration for the Todo Sorter service.
"""
from django.urls import path, re_path
from ninja import NinjaAPI

from apps.core.handlers import register_exception_handlers, not_found

api = NinjaAPI(
    title="Todo Sorter API",
    version="1.0.0",
    description="Microservice for sorting todo items with various strategies",
    docs_url="/docs",
)
register_exception_handlers(api)

from apps.core.api import router as core_router
from apps.sorting.api import router as sorting_router

api.add_router("/", sorting_router)
api.add_router("/", core_router)

urlpatterns = [
    path('', api.urls),
    re_path(r'^.*$', not_found),
]
