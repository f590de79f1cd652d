"""
Gateway API Endpoints

This package contains the FastAPI routers for the node web gateway:
- base: Node state endpoints (current slot, leaders, key, head hash, local txs)
- ssc: SSC endpoints under /ssc (toggle participation, secret, stage)
"""
