# design_capacity_planner/planner/services/errors.py

from __future__ import annotations


class NotFoundError(LookupError):
    """Requested scenario/item/record does not exist."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class ConflictError(ValueError):
    """Operation is not allowed in the record's current state."""


__all__ = ["NotFoundError", "ConflictError"]
