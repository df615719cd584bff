"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, query params, responses)
    - Domain enums from core/ used for type and status fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
    - Request schemas never declare user_id: the owner always comes from the credential
"""
