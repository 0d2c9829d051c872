"""
Auth server API package.

The FastAPI application lives in ``api.app``; this package also holds the
service container, exception handlers and the account routes.
"""
