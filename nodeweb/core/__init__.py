"""
Gateway core: leader lookup, SSC stage and participation control.

Transport-independent; nodeweb.api binds these operations to HTTP routes.
"""

from nodeweb.core.errors import GatewayError, LeadersNotFound, SecretNotImplemented
from nodeweb.core.gateway import QueryGateway
from nodeweb.core.leaders import LeaderLookup

__all__ = [
    "GatewayError",
    "LeadersNotFound",
    "SecretNotImplemented",
    "QueryGateway",
    "LeaderLookup",
]
