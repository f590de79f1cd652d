"""
Node Web Gateway
================

FastAPI application exposing node state.

Endpoints:
- GET /: Health check + build info
- GET /health: Kubernetes health check
- Base node API (nodeweb.api.base)
- SSC API under /ssc (nodeweb.api.ssc), unless built base-only

Error mapping:
- LeadersNotFound -> 404 with message and epoch descriptor
- SecretNotImplemented -> 501
- Anything else -> 500 (logged, body does not leak internals)
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nodeweb import __version__
from nodeweb.api import base, ssc
from nodeweb.config import BUILD_ID, GITHUB_COMMIT, GatewayConfig, validate_config
from nodeweb.core.errors import LeadersNotFound, SecretNotImplemented
from nodeweb.core.gateway import QueryGateway
from nodeweb.models.responses import ErrorResponse, HealthResponse
from nodeweb.node.clock import ClockSlotOracle
from nodeweb.node.context import NodeContext, ParticipationFlag
from nodeweb.node.memory import InMemoryLeaderStore, InMemoryNodeState
from nodeweb.utils.slotting import SlotPhaseClassifier

logger = logging.getLogger(__name__)


# ============================================================
# Gateway Wiring
# ============================================================

def build_gateway(config: GatewayConfig) -> QueryGateway:
    """
    Build a QueryGateway over the reference (in-memory, wall-clock) collaborators.

    A node embedding the gateway passes its own collaborators to QueryGateway
    directly instead.
    """
    validate_config(config)
    return QueryGateway(
        slot_oracle=ClockSlotOracle(
            system_start=config.SYSTEM_START,
            slot_duration=config.SLOT_DURATION_SECONDS,
            epoch_slots=config.get_epoch_slots(),
        ),
        leader_store=InMemoryLeaderStore(),
        node_context=NodeContext(
            public_key=config.PUBLIC_KEY,
            participate_ssc=ParticipationFlag(config.PARTICIPATE_SSC),
        ),
        node_state=InMemoryNodeState(),
        classifier=SlotPhaseClassifier(config.get_ssc_windows()),
    )


# ============================================================
# Exception Handlers
# ============================================================

async def leaders_not_found_handler(request: Request, exc: LeadersNotFound):
    return JSONResponse(
        status_code=404,
        content=ErrorResponse(
            error="leaders_not_found",
            detail=str(exc),
            descriptor=exc.descriptor,
        ).model_dump(),
    )


async def secret_not_implemented_handler(request: Request, exc: SecretNotImplemented):
    return JSONResponse(
        status_code=501,
        content=ErrorResponse(error="not_implemented", detail=str(exc)).model_dump(),
    )


async def unhandled_error_middleware(request: Request, call_next):
    """
    Answer collaborator failures with a generic 500.

    The error is logged here once and not re-raised, so the server does not
    print a second traceback for it.
    """
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="internal_error", detail="Internal server error").model_dump(),
        )


# ============================================================
# Application Factory
# ============================================================

def create_app(
    gateway: QueryGateway,
    config: Optional[GatewayConfig] = None,
    with_ssc: Optional[bool] = None,
) -> FastAPI:
    """
    Create the FastAPI app serving a gateway.

    Args:
        gateway: Gateway answering the requests
        config: Gateway configuration (defaults to GatewayConfig())
        with_ssc: Mount /ssc routes; overrides config.ENABLE_SSC when given

    Returns:
        Configured FastAPI application
    """
    config = config or GatewayConfig()
    ssc_enabled = config.ENABLE_SSC if with_ssc is None else with_ssc

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        print("=" * 60)
        print("🚀 NODE WEB GATEWAY STARTING")
        print(f"   Build ID: {BUILD_ID}")
        print(f"   API: {'base + ssc' if ssc_enabled else 'base only'}")
        print("=" * 60)
        yield
        print("🛑 Node web gateway stopped")

    app = FastAPI(
        title="Node Web Gateway",
        description="Read-mostly HTTP view of node state",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.gateway = gateway
    app.state.config = config

    app.add_exception_handler(LeadersNotFound, leaders_not_found_handler)
    app.add_exception_handler(SecretNotImplemented, secret_not_implemented_handler)
    app.middleware("http")(unhandled_error_middleware)

    # Registered after the error middleware so it wraps it and sees the 500s
    if config.REQUEST_LOGGING:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            status_code = 500
            try:
                response = await call_next(request)
                status_code = response.status_code
                return response
            finally:
                elapsed_ms = (time.perf_counter() - started) * 1000
                logger.info("%s %s -> %d (%.1fms)", request.method, request.url.path,
                            status_code, elapsed_ms)

    app.include_router(base.router)
    if ssc_enabled:
        app.include_router(ssc.router)

    @app.get("/", response_model=HealthResponse)
    async def root():
        """
        Health check + build info.
        """
        return HealthResponse(
            service="nodeweb-gateway",
            status="ok",
            build_id=BUILD_ID,
            github_commit=GITHUB_COMMIT,
            ssc_enabled=ssc_enabled,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    @app.get("/health")
    async def health():
        """
        Kubernetes health check.
        """
        return {"status": "healthy"}

    return app


def create_default_app() -> FastAPI:
    """
    App built from environment configuration.

    Usage:
        uvicorn nodeweb.main:create_default_app --factory
    """
    config = GatewayConfig.from_env()
    return create_app(build_gateway(config), config)


# ============================================================
# Run Server
# ============================================================

if __name__ == "__main__":
    import uvicorn

    config = GatewayConfig.from_env()
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    uvicorn.run(
        create_app(build_gateway(config), config),
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )
