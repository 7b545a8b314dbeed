# core/principal.py
"""
Principal identities.

A principal is an opaque string token naming an actor (owner, caller,
verifier, admin). Registries compare principals for equality only and never
inspect their format.
"""
from typing import TypeAlias

Principal: TypeAlias = str


def same_principal(a: Principal | None, b: Principal | None) -> bool:
    """Exact equality; a missing principal never matches."""
    if a is None or b is None:
        return False
    return a == b
