"""Infrastructure Layer — store access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All store calls wrapped with error mapping (database.store_operation)
"""
