"""
Scatter-Brain Backend — Thought Route Handlers
===============================================

What:  POST/GET /api/thoughts and GET/PUT /api/thoughts/{id}.
How:   Parses the path identifier, delegates to ThoughtService, returns JSON.
Who:   Called by the browser front end served from the static root.

Status codes:
    POST   /api/thoughts        201 created Thought   | 400 malformed body
    GET    /api/thoughts        200 [Thought]
    GET    /api/thoughts/{id}   200 Thought           | 400 bad id | 404 unknown id
    PUT    /api/thoughts/{id}   204 (no body)         | 400 bad id or body | 404 unknown id

Errors are raised, not returned; the global handlers in main.py format them.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from scatterbrain.identifiers import parse_id
from scatterbrain.schemas.thought import ErrorResponse, Thought, ThoughtPost
from scatterbrain.services.thought_service import ThoughtService, get_thought_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Thoughts"])


@router.post(
    "/thoughts",
    status_code=201,
    response_model=Thought,
    responses={
        201: {"description": "Thought created", "model": Thought},
        400: {"description": "Malformed body", "model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ThoughtPost.model_json_schema(by_alias=True)}},
        }
    },
    summary="Create a thought",
)
async def create_thought(
    request: Request,
    service: ThoughtService = Depends(get_thought_service),
) -> Thought:
    """
    Store a new thought.

    Body: {"Title": "...", "Thought": "..."}. The server assigns ID and
    CreatedTime; `Thought` is stored as `Content`. The body is read raw and
    decoded as JSON regardless of the request's Content-Type.
    """
    return await service.create_thought(request.body)


@router.get(
    "/thoughts",
    response_model=List[Thought],
    summary="List every thought",
    description="Returns all stored thoughts in no particular order. An empty store returns [].",
)
async def list_thoughts(
    service: ThoughtService = Depends(get_thought_service),
) -> List[Thought]:
    return await service.list_thoughts()


@router.get(
    "/thoughts/{thought_id}",
    response_model=Thought,
    responses={
        200: {"description": "The thought", "model": Thought},
        400: {"description": "Identifier is not a UUID", "model": ErrorResponse},
        404: {"description": "No thought with that identifier", "model": ErrorResponse},
    },
    summary="Get a thought by ID",
)
async def get_thought(
    thought_id: str,
    service: ThoughtService = Depends(get_thought_service),
) -> Thought:
    return await service.get_thought(parse_id(thought_id))


@router.put(
    "/thoughts/{thought_id}",
    status_code=204,
    response_class=Response,
    responses={
        204: {"description": "Thought replaced"},
        400: {"description": "Identifier or body could not be parsed", "model": ErrorResponse},
        404: {"description": "No thought with that identifier", "model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Thought"}}},
        }
    },
    summary="Replace a thought",
)
async def update_thought(
    thought_id: str,
    request: Request,
    service: ThoughtService = Depends(get_thought_service),
) -> Response:
    """
    Replace the stored thought with the full Thought in the body.

    The body is read by hand rather than declared as a parameter: FastAPI
    validates declared bodies before the handler runs, and an unknown id
    must answer 404 even when the body is malformed.
    """
    identifier = parse_id(thought_id)
    await service.update_thought(identifier, request.body)
    return Response(status_code=204, media_type="application/json")
