"""Account Gateway Package: session bookkeeping in front of a remote account server.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
