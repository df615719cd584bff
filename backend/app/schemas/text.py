"""Shared text validation for free-text fields."""


def strip_required_text(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("text cannot be empty or whitespace")
    return v
