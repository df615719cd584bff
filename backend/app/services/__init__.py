"""Services Layer — per-resource repositories and ownership enforcement.

Invariants:
    - One repository class per resource kind, constructed per request with its session
    - Every update/delete of an owned record goes through services/ownership.py

Design Decisions:
    - Repositories commit their own writes: one request, one transaction
"""
