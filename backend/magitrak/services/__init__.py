"""Services Layer — match pipeline orchestration.

Invariants:
    - Services depend on core protocols, never on concrete infrastructure
"""
