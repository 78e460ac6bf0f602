"""
Core app - Service-wide plumbing.

This app provides:
- Health and service info endpoints
- Shared API error responses and the 404 catch-all
- Request logging middleware
"""
