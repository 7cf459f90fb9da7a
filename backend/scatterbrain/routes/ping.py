"""
Scatter-Brain Backend — Ping Route
===================================

What:  Liveness endpoint for process supervisors and load balancers.
How:   Returns a fixed payload; never touches the thought store.
Who:   Called by Docker health checks, load balancers, and uptime monitors.

/api/ping answers any method with the same payload. Only GET is listed in
the OpenAPI schema.
"""

from fastapi import APIRouter

from scatterbrain.schemas.thought import PingResponse

router = APIRouter(prefix="/api", tags=["Health"])

# Every other method a client might send to /api/ping
OTHER_METHODS = ["HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.get(
    "/ping",
    response_model=PingResponse,
    summary="Service liveness check",
)
async def ping() -> PingResponse:
    """Always answers {"Status": "pong", "Service": "scatter-brain"}."""
    return PingResponse()


router.add_api_route(
    "/ping",
    ping,
    methods=OTHER_METHODS,
    response_model=PingResponse,
    include_in_schema=False,
)
