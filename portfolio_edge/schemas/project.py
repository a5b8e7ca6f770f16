# File: portfolio_edge/schemas/project.py

import json
from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from portfolio_edge.core.errors import RecordDecodeError


class ProjectRecord(BaseModel):
    """
    One portfolio entry as stored in the record store.

    The project id lives in the storage key (``project:<id>``), not in
    the body. ``imageKey`` and ``image`` are two separate image references
    and are both rendered by the page shell.
    """

    # Unknown fields are kept so records are relayed as stored
    model_config = ConfigDict(extra="allow")

    name: str
    description: str
    createdAt: str
    imageKey: Optional[str] = None
    image: Optional[str] = None
    tags: Optional[List[str]] = None

    @classmethod
    def decode(cls, raw: str, *, key: Optional[str] = None) -> "ProjectRecord":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise RecordDecodeError(f"Invalid JSON in record {key!r}: {exc}", key=key) from exc
        if not isinstance(payload, dict):
            raise RecordDecodeError(f"Record {key!r} is not a JSON object", key=key)
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise RecordDecodeError(f"Record {key!r} failed validation: {exc}", key=key) from exc

    def encode(self) -> dict[str, Any]:
        # Absent optional fields stay absent; extra fields are kept
        present = set(self.model_fields_set) | set(self.model_extra or {})
        return {k: v for k, v in self.model_dump().items() if k in present}

    def created_at_timestamp(self) -> Optional[datetime]:
        """Parse ``createdAt``; None when it is not an ISO-8601 timestamp."""
        value = self.createdAt.strip()
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
