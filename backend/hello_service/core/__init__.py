"""Core Layer — pure constants and payload builders, no IO, no async.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - All functions are pure and deterministic
"""
