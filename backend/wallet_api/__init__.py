"""Wallet API Package — users and transactions REST backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
