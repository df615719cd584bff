"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Engines and sessions are owned by infrastructure/database.py, not by this package
"""
