"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - All external calls wrapped with timeout and error mapping (no retries)

Design Decisions:
    - Thin wrappers over httpx/SQLAlchemy: collaborators are injected, never global
"""
