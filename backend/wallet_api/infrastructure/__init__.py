"""Infrastructure Layer — database, security, file storage and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Library exceptions mapped to core/errors.py types at this boundary
"""
