"""Infrastructure Layer — database, record store, session provider, logging.

Invariants:
    - Implements the protocols declared in core/repository_protocols.py
"""
