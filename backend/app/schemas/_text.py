"""Shared text normalisation for request schemas."""


def strip_required(v: str, field: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError(f"{field} cannot be empty or whitespace")
    return v


def strip_optional(v: str | None) -> str | None:
    if v is None:
        return None
    v = v.strip()
    return v or None
