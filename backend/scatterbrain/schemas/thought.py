"""
Scatter-Brain Backend — Pydantic Request/Response Schemas
==========================================================

What:  Pydantic models defining the JSON contract of the thoughts API.
How:   Field aliases carry the wire casing (ID, CreatedTime, Title, Content);
       FastAPI serializes responses by alias, so Python code uses snake_case
       while clients see the documented keys.
Who:   Used by the thought service to decode bodies and by routes as
       response models.

Wire shapes:
    Thought      {"ID": "<uuid>", "CreatedTime": "<RFC 3339>", "Title": "...", "Content": "..."}
    ThoughtPost  {"Title": "...", "Thought": "..."}

    The creation input names the content field `Thought`; the stored record
    names it `Content`. ThoughtService.create_thought() performs the mapping.

Decoding rules:
    - Object keys match fields case-insensitively ("title" fills Title);
      when both an exact-case and a folded key are present, the exact one wins.
    - Unknown keys are ignored.
    - Missing fields take their zero value ("" for strings, the nil UUID and
      0001-01-01T00:00:00Z for the update-only ID / CreatedTime fields).
    - A present field of the wrong JSON type is a validation error.
    - ID must be the canonical 8-4-4-4-12 form and CreatedTime an RFC 3339
      timestamp with a time zone; epoch numbers, bare dates and naive times
      are rejected.
"""

import re
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator, model_validator

from scatterbrain import SERVICE_NAME
from scatterbrain.identifiers import NIL_ID, is_canonical_id

# Zero value for CreatedTime when a PUT body omits it
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})"
)


class CaseInsensitiveModel(BaseModel):
    """Base model whose input keys are matched to aliases ignoring case."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        wanted: Dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            wanted[alias.lower()] = alias
            wanted.setdefault(name.lower(), alias)

        folded: Dict[str, Any] = {}
        for key, value in data.items():
            if not isinstance(key, str):
                continue
            alias = wanted.get(key.lower())
            if alias is None:
                continue
            if alias in folded and key != alias:
                continue
            folded[alias] = value
        return folded


# ══════════════════════════════════════════════════════════════════════════
# Resource Models
# ══════════════════════════════════════════════════════════════════════════


class Thought(CaseInsensitiveModel):
    """
    What:  A stored thought.
    Who:   Returned by POST/GET /api/thoughts[/{id}]; accepted whole by PUT.

    `id` and `created_time` are assigned by the server on creation. A PUT
    body may carry them too and is stored as sent.
    """

    id: uuid.UUID = Field(default=NIL_ID, alias="ID", description="Thought identifier (UUID)")
    created_time: AwareDatetime = Field(
        default=ZERO_TIME,
        alias="CreatedTime",
        description="When the thought was created (RFC 3339)",
    )
    title: str = Field(default="", alias="Title")
    content: str = Field(default="", alias="Content")

    @field_validator("id", mode="before")
    @classmethod
    def require_canonical_id(cls, v: Any) -> Any:
        """Only the 36-character hyphenated form, as accepted in URLs."""
        if isinstance(v, uuid.UUID):
            return v
        if not is_canonical_id(v):
            raise ValueError("ID must be a canonical UUID string")
        return v

    @field_validator("created_time", mode="before")
    @classmethod
    def require_rfc3339(cls, v: Any) -> Any:
        """Strings must be full RFC 3339 timestamps; numbers are refused."""
        if isinstance(v, datetime):
            return v
        if not isinstance(v, str) or not _RFC3339.fullmatch(v):
            raise ValueError("CreatedTime must be an RFC 3339 timestamp with a time zone")
        return v


class ThoughtPost(CaseInsensitiveModel):
    """
    What:  Creation input for POST /api/thoughts.
    Note:  The body field is named `Thought`, not `Content`.
    """

    title: str = Field(default="", alias="Title")
    thought: str = Field(default="", alias="Thought")


# ══════════════════════════════════════════════════════════════════════════
# Status & Error Models
# ══════════════════════════════════════════════════════════════════════════


class PingResponse(BaseModel):
    """Liveness payload returned by GET /api/ping."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(default="pong", alias="Status")
    service: str = Field(default=SERVICE_NAME, alias="Service")


class ErrorResponse(BaseModel):
    """
    What:  Error body for every 4xx/5xx produced by the API.

    Example:
        {
            "error": "not_found",
            "message": "unable to locate thought '5f1c7a52-3c0e-4f4b-9a8e-2d4c6b1e0f93'",
            "request_id": "a1b2c3d4"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
