"""Fake Account Server: scripted AccountServer for SessionManager tests.

Invariants:
    - Responses scripted per method, optionally per exact argument tuple
    - Exact-argument scripts win over any-argument scripts
    - A script of several responses is consumed in order; the last one repeats
    - A scripted Exception instance is raised instead of returned
    - Every call is logged (method, args) so tests can assert call counts
    - Unscripted calls raise RuntimeError: a test never silently gets a default
"""

import asyncio

from accountgate.core.account_results import RemoteOutcome
from accountgate.core.domain_types import RemoteStatus

ANY = None


def success(payload=None) -> RemoteOutcome:
    return RemoteOutcome(RemoteStatus.SUCCESS, payload)


def remote(status: RemoteStatus, payload=None) -> RemoteOutcome:
    return RemoteOutcome(status, payload)


class FakeAccountServer:
    """Replaces HttpAccountServer. Satisfies the AccountServer protocol."""

    def __init__(self, latency: float = 0.0):
        self._scripts: dict[tuple[str, tuple | None], list] = {}
        self.calls: list[tuple[str, tuple]] = []
        self.latency = latency
        self.in_flight = 0
        self.max_in_flight = 0

    def script(self, method: str, *responses, args: tuple | None = ANY) -> None:
        """Queue responses for method (any arguments unless args given)."""
        if not responses:
            raise ValueError("script() needs at least one response")
        self._scripts[(method, args)] = list(responses)

    def count(self, method: str) -> int:
        return sum(1 for m, _ in self.calls if m == method)

    @property
    def total_calls(self) -> int:
        return len(self.calls)

    # -- AccountServer protocol -----------------------------------------------

    async def login(self, name, hardened_password):
        return await self._answer("login", (name, hardened_password))

    async def logout(self, session_id):
        return await self._answer("logout", (session_id,))

    async def deposit(self, session_id, amount):
        return await self._answer("deposit", (session_id, amount))

    async def withdraw(self, session_id, amount):
        return await self._answer("withdraw", (session_id, amount))

    async def get_balance(self, session_id):
        return await self._answer("get_balance", (session_id,))

    # -- Internals --------------------------------------------------------------

    async def _answer(self, method, args):
        self.calls.append((method, args))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.latency:
                await asyncio.sleep(self.latency)
            response = self._next(method, args)
        finally:
            self.in_flight -= 1
        if isinstance(response, Exception):
            raise response
        return response

    def _next(self, method, args):
        queue = self._scripts.get((method, args))
        if queue is None:
            queue = self._scripts.get((method, ANY))
        if queue is None:
            raise RuntimeError(
                f"FakeAccountServer: no response scripted for {method}{args}",
            )
        return queue.pop(0) if len(queue) > 1 else queue[0]
