"""
Node Web Gateway
================

Read-mostly HTTP view of a running node's state.

Features:
- Current slot and slot leaders per epoch
- Node public key, head block hash, local pending transaction count
- SSC (shared seed computation) stage reporting
- Runtime toggle for SSC participation
"""

__version__ = "0.4.0"
__author__ = "Node Web Team"
