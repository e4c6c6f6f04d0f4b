"""Pydantic Schemas — request payloads for the REST endpoints.

Invariants:
    - Schemas only parse reference ids (user_id, project_id, assigned_to) as int;
      free-text fields accept any JSON scalar and are stored as sent
    - Presence rules live in core/validation.py so a missing field yields the
      resource-specific 400 message

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
