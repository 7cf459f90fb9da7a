"""
Scatter-Brain Backend — Thought Service (Business Logic)
=========================================================

What:  Create / list / get / update workflow for thoughts.
How:   Decodes request bodies into schemas, reads and writes the ThoughtStore,
       and translates "absent" and "undecodable" into NotFoundError and
       BadRequestError.
Who:   Called by the thought route handlers; calls the store.

Update ordering (PUT /api/thoughts/{id}):
    1. The id must already exist  → NotFoundError, body never read
    2. The body must decode       → BadRequestError
    3. The decoded Thought replaces the stored record as sent
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Awaitable, Callable, List, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from scatterbrain.exceptions import BadRequestError, NotFoundError
from scatterbrain.identifiers import format_id, new_id
from scatterbrain.schemas.thought import Thought, ThoughtPost
from scatterbrain.store.base import ThoughtStore

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def describe_validation_errors(errors: List[dict]) -> str:
    """Flatten Pydantic error entries into a single readable line."""
    parts = []
    for error in errors:
        loc = ".".join(str(p) for p in error.get("loc", ()))
        msg = error.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid request body"


def decode_body(model: Type[M], raw: bytes) -> M:
    """
    Parse a raw request body into `model`.

    Pydantic's JSON parser reports syntax errors, wrong shapes and excessive
    nesting alike as a ValidationError.

    Raises:
        BadRequestError: The body does not decode into `model` (→ 400)
    """
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        errors = describe_validation_errors(e.errors())
        logger.warning("%s body rejected: %s", model.__name__, errors)
        raise BadRequestError(message="unable to parse the resource", context={"errors": errors})


class ThoughtService:
    """
    Business logic layer for thought operations.

    Holds no state of its own beyond the injected store, so every request
    sees the same store and tests can hand in a fresh one.
    """

    def __init__(self, store: ThoughtStore):
        self.store = store

    async def create_thought(self, read_body: Callable[[], Awaitable[bytes]]) -> Thought:
        """
        Decode a creation body and store a new Thought built from it.

        The body is parsed as JSON whatever its Content-Type. The input's
        `Thought` field becomes the record's `Content`.

        Raises:
            BadRequestError: Body is not a JSON object of ThoughtPost shape (→ 400)
        """
        logger.info("Adding a new thought to the system.")
        payload = decode_body(ThoughtPost, await read_body())
        thought = Thought(
            id=new_id(),
            created_time=datetime.now(timezone.utc),
            title=payload.title,
            content=payload.thought,
        )
        self.store.put(thought.id, thought)
        logger.debug("Thought %s stored", format_id(thought.id))
        return thought

    async def list_thoughts(self) -> List[Thought]:
        """Return every stored thought; an empty store yields []."""
        return self.store.list()

    async def get_thought(self, thought_id: uuid.UUID) -> Thought:
        """
        Fetch one thought.

        Raises:
            NotFoundError: No thought is stored at `thought_id` (→ 404)
        """
        logger.info("Received a call to fetch thought %s", format_id(thought_id))
        thought = self.store.get(thought_id)
        if thought is None:
            raise NotFoundError(resource="thought", resource_id=format_id(thought_id))
        return thought

    async def update_thought(
        self,
        thought_id: uuid.UUID,
        read_body: Callable[[], Awaitable[bytes]],
    ) -> Thought:
        """
        Replace the thought at `thought_id` with a decoded request body.

        `read_body` is only awaited once the id is known to exist, so a PUT
        to an unknown id never consumes or parses its body.

        The decoded record is stored exactly as sent, including any `ID` or
        `CreatedTime` it carries. Mismatches are logged, not rejected.

        Raises:
            NotFoundError:   No thought is stored at `thought_id` (→ 404)
            BadRequestError: Body is not a JSON object of Thought shape (→ 400)
        """
        existing = await self.get_thought(thought_id)

        replacement = decode_body(Thought, await read_body())

        if replacement.id != thought_id:
            logger.warning(
                "Thought %s overwritten with body ID %s",
                format_id(thought_id),
                format_id(replacement.id),
            )
        if replacement.created_time != existing.created_time:
            logger.warning(
                "Thought %s CreatedTime changed from %s to %s",
                format_id(thought_id),
                existing.created_time.isoformat(),
                replacement.created_time.isoformat(),
            )

        self.store.put(thought_id, replacement)
        return replacement


# ── Dependency ────────────────────────────────────────────────────────────
def get_thought_service(request: Request) -> ThoughtService:
    """
    FastAPI dependency returning the ThoughtService bound to this app.

    The service is attached to app.state by create_app(), so every app
    instance (and every test client) has its own store.
    """
    return request.app.state.thought_service
