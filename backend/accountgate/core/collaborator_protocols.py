"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - The remote account server is reached only through AccountServer
    - Implementations are provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes need no base class
    - Async in Protocol: implementations do IO; the core rules that consume
      their results stay synchronous and the service awaits around them
    - PasswordHardener is a plain callable, injected as a value
"""

from collections.abc import Callable
from typing import Protocol

from accountgate.core.account_results import RemoteOutcome


PasswordHardener = Callable[[str], str]


class AccountServer(Protocol):
    """Contract for the remote account server: implemented by shell."""
    async def login(self, name: str, hardened_password: str) -> RemoteOutcome: ...
    async def logout(self, session_id: int) -> RemoteOutcome: ...
    async def deposit(self, session_id: int, amount: float) -> RemoteOutcome: ...
    async def withdraw(self, session_id: int, amount: float) -> RemoteOutcome: ...
    async def get_balance(self, session_id: int) -> RemoteOutcome: ...
