"""Core Layer - domain logic with no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Recipe rules and store bookkeeping are deterministic
"""
