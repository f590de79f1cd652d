"""
SSC API Endpoints

Endpoints for the SSC (shared seed computation) sub-protocol:
- PUT /ssc/toggle/{enable} - Enable or disable SSC participation
- GET /ssc/secret - This node's SSC secret (not implemented, always 501)
- GET /ssc/stage - SSC stage of the current slot
"""

import asyncio

from fastapi import APIRouter, Depends

from nodeweb.api.deps import get_gateway
from nodeweb.core.gateway import QueryGateway
from nodeweb.models.responses import ErrorResponse
from nodeweb.models.types import SscStage

router = APIRouter(prefix="/ssc", tags=["SSC"])


@router.put("/toggle/{enable}", response_model=None)
async def toggle_participation(enable: bool, gateway: QueryGateway = Depends(get_gateway)):
    """
    Enable or disable this node's participation in SSC.

    The SSC engine reads the flag before running its protocol steps, so the
    change takes effect from the next step on.

    Example:
        PUT /ssc/toggle/false
    """
    gateway.toggle_participation(enable)


@router.get(
    "/secret",
    responses={501: {"model": ErrorResponse, "description": "Not implemented"}},
)
async def get_our_secret(gateway: QueryGateway = Depends(get_gateway)):
    return gateway.our_secret()


@router.get("/stage", response_model=SscStage)
async def get_ssc_stage(gateway: QueryGateway = Depends(get_gateway)):
    return await asyncio.to_thread(gateway.ssc_stage)
