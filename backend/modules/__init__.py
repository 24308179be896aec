"""
Feature modules for AccountKit backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- exceptions.py: Module-specific exceptions
- service.py / store.py: Implementation
- routes.py: FastAPI route handlers (auth only)

Modules communicate through interfaces, not concrete implementations.
"""
