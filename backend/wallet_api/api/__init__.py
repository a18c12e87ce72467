"""API Layer — FastAPI routes, request dependencies, envelope and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success responses use the {message, body, options} envelope
    - Thin routes delegate to services
"""
