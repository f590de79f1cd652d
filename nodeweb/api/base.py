"""
Base Node API Endpoints

Read-only views of node state:
- GET /current_slot - Current slot (epoch + slot index)
- GET /leaders?epoch=N - Slot leaders for epoch N (current epoch if omitted)
- GET /key - This node's public key
- GET /head_hash - Hash of the head block header
- GET /local_txs_num - Number of pending local transactions

Collaborator calls may block, so they run in a worker thread.
"""

import asyncio
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from nodeweb.api.deps import get_gateway
from nodeweb.core.gateway import QueryGateway
from nodeweb.models.responses import ErrorResponse
from nodeweb.models.types import SlotId

router = APIRouter(tags=["Node"])


@router.get("/current_slot", response_model=SlotId)
async def get_current_slot(gateway: QueryGateway = Depends(get_gateway)):
    return await asyncio.to_thread(gateway.current_slot)


@router.get(
    "/leaders",
    response_model=List[str],
    responses={404: {"model": ErrorResponse, "description": "Leaders not known for epoch"}},
)
async def get_leaders(
    epoch: Optional[int] = Query(None, ge=0, description="Epoch index (current epoch if omitted)"),
    gateway: QueryGateway = Depends(get_gateway),
):
    """
    Get slot leaders for an epoch.

    Args:
        epoch: Epoch index; the current epoch is used when omitted

    Returns:
        Public keys of slot leaders, one per slot index

    Raises:
        404: Leaders are not known for the epoch (not elected yet)

    Example:
        GET /leaders?epoch=7
    """
    return await asyncio.to_thread(gateway.leaders, epoch)


@router.get("/key", response_model=str)
async def get_key(gateway: QueryGateway = Depends(get_gateway)):
    return gateway.identity()


@router.get("/head_hash", response_model=str)
async def get_head_hash(gateway: QueryGateway = Depends(get_gateway)):
    return await asyncio.to_thread(gateway.head_hash)


@router.get("/local_txs_num", response_model=int)
async def get_local_txs_num(gateway: QueryGateway = Depends(get_gateway)):
    return await asyncio.to_thread(gateway.local_txs_num)
