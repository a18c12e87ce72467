"""Core — pure domain rules: errors, types, ownership, pagination, upload limits.

Invariants:
    - Core never imports from api/, infrastructure/ or services/
    - No IO in core functions
"""
