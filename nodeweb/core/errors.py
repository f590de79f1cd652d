"""
Gateway Errors
==============

Failures the gateway itself raises. Anything else raised while answering a
request comes from a collaborator and is passed through untouched.

- LeadersNotFound: leaders for the epoch are not known (yet); retry later
- SecretNotImplemented: the SSC secret endpoint is not available
"""

from typing import Optional

from nodeweb.utils.formatting import epoch_descriptor


class GatewayError(Exception):
    """Base class for failures raised by the gateway core."""


class LeadersNotFound(GatewayError):
    """
    Slot leaders are not known for the requested epoch.

    Attributes:
        epoch: The explicitly requested epoch, or None for "current"
        descriptor: "current" or "for the Nth epoch"
    """

    def __init__(self, epoch: Optional[int]):
        self.epoch = epoch
        self.descriptor = epoch_descriptor(epoch)
        if epoch is None:
            message = "Leaders are not known for the current epoch"
        else:
            message = f"Leaders are not known {self.descriptor}"
        super().__init__(message)


class SecretNotImplemented(GatewayError):
    """Reading this node's SSC secret over the gateway is not implemented."""

    def __init__(self):
        super().__init__("Getting the SSC secret is not implemented")
