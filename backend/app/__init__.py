"""Movie Magic Application Package — catalog relay and social annotations API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
