"""Core Layer — pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or schemas/
    - Domain failures are raised as UsersServiceError subclasses
"""
