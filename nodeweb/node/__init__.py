"""
Node collaborators consumed by the gateway.

- interfaces: Protocols the gateway depends on
- context: node identity + SSC participation flag
- memory: in-memory leader store and node state
- clock: wall-clock slot oracle
"""
