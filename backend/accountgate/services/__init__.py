"""Services Layer: orchestrates core rules around the remote account server.

Invariants:
    - Services own all awaiting and locking; core stays synchronous
"""
