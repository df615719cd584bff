"""Core Layer — pure domain logic: errors, domain types, query translation.

Invariants:
    - Core never imports from api/, services/ or infrastructure/
    - No IO in core; async appears only in Protocol signatures

Design Decisions:
    - Functional core, imperative shell: translation rules tested without HTTP
"""
