"""
Feature modules for SessionGate backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- service.py: Implementation
- exceptions.py: Module-specific exceptions

Modules:
- sessions: Client for the remote users service
- coordinator: Client-side session state for a long-lived UI process

Modules communicate through interfaces, not concrete implementations.
"""
