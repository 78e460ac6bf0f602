"""
ASGI config for the Todo Sorter service.

Serve with any ASGI server, e.g.:
    uvicorn config.asgi:application --port $PORT
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

# Initialize Django at module load time, not on the first request
application = get_asgi_application()
