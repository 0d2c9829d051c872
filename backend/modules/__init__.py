"""
Feature modules for the auth server.

Each module keeps its public surface in:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic records and wire models
- service.py: Business logic implementation
- routes.py: FastAPI route handlers, where the module serves HTTP
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
"""
