"""Services — one function per resource action; sessions and identity passed explicitly.

Invariants:
    - Services never build HTTP responses (routes own the envelope)
    - Failures raised as core/errors.py types, never as HTTPException
"""
