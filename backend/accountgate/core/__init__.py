"""Core Layer: pure session reconciliation logic, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Functions are pure and deterministic; only SessionTable holds mutable state
    - Collaborators (account server, password hardener) are described as Protocols here
      and implemented by the shell
"""
