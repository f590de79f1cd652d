"""
Pydantic models shared by the gateway core and its HTTP routers.
"""

from nodeweb.models.types import SlotId, SlotLeaders, SscStage
from nodeweb.models.responses import ErrorResponse, HealthResponse

__all__ = ["SlotId", "SlotLeaders", "SscStage", "ErrorResponse", "HealthResponse"]
