"""
Request dependencies shared by the routers.
"""

from fastapi import Request

from nodeweb.core.gateway import QueryGateway


def get_gateway(request: Request) -> QueryGateway:
    """QueryGateway stored on app.state by create_app()."""
    return request.app.state.gateway
