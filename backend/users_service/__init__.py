"""users-service — demonstration HTTP service over an in-memory users resource.

Invariants:
    - Package root contains no executable code beyond the version constant
"""

__version__ = "1.0.0"
