"""Infrastructure Layer — process-level concerns (logging setup).

Invariants:
    - Nothing here holds domain state
"""
