"""Service Layer — per-resource request handlers (validate, check, act, shape).

Invariants:
    - Handlers hold only the request's AsyncSession; no state survives a request
    - Every store call runs inside store_operation() so failures become DatabaseError
    - Foreign-key checks are a separate read before the write (check-then-act)
"""
