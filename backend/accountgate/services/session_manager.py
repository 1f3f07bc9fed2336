"""Session Manager: reconciles local session bookkeeping with the remote account server.

Invariants:
    - Every operation: local gate -> (maybe) one remote call -> translate -> (maybe) mutate table
    - Table changes only on login success (record) and logout success (discard)
    - Operations on the same name run one at a time under that name's asyncio.Lock,
      held across the remote call; different names never wait on each other
    - Transport failures (AccountServerError) resolve to UNDEFINED_ERROR at the boundary,
      table untouched, never retried
    - Passwords (plain or hardened) are never logged
    - Hardening runs in a worker thread so a slow hardener never stalls other names
    - A login SUCCESS is recorded only when it carries an integer session token

Design Decisions:
    - Per-name locks live in a WeakValueDictionary: a lock exists only while some
      operation on that name holds a reference to it
    - logout forwards the caller's session_id verbatim without comparing it with the
      stored token (observable upstream behaviour, kept as-is)
"""

import asyncio
import logging
import weakref
from collections.abc import Awaitable, Callable

from accountgate.core.account_results import LocalResult, RemoteOutcome
from accountgate.core.collaborator_protocols import AccountServer, PasswordHardener
from accountgate.core.domain_types import (
    AccountOperation, RemoteStatus, SessionToken,
)
from accountgate.core.enforce_session import (
    check_login_allowed, check_logout_allowed, check_session_matches,
)
from accountgate.core.errors import AccountServerError
from accountgate.core.map_outcomes import translate
from accountgate.core.session_table import SessionTable

logger = logging.getLogger(__name__)


class SessionManager:
    """Owns the session table and the five account operations."""

    def __init__(self, server: AccountServer, harden: PasswordHardener):
        self._server = server
        self._harden = harden
        self._table = SessionTable()
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    # ─── Public operations ───────────────────────────────────────

    async def login(self, name: str, password: str) -> LocalResult:
        hardened = await asyncio.to_thread(self._harden, password)
        async with self._lock_for(name):
            rejection = check_login_allowed(self._table, name)
            if rejection is not None:
                return self._reject(AccountOperation.LOGIN, name, rejection)

            remote = await self._call_remote(
                AccountOperation.LOGIN, name,
                self._server.login(name, hardened),
            )
            result = translate(AccountOperation.LOGIN, remote)
            if result.succeeded:
                self._table.record(name, SessionToken(remote.payload))
                logger.info(
                    "Session opened",
                    extra={"user_name": name, "operation": "login"},
                )
            return self._finish(AccountOperation.LOGIN, name, remote, result)

    async def logout(self, name: str, session_id: int) -> LocalResult:
        async with self._lock_for(name):
            rejection = check_logout_allowed(self._table, name)
            if rejection is not None:
                return self._reject(AccountOperation.LOGOUT, name, rejection)

            remote = await self._call_remote(
                AccountOperation.LOGOUT, name,
                self._server.logout(session_id),
            )
            result = translate(AccountOperation.LOGOUT, remote)
            if result.succeeded:
                self._table.discard(name)
                logger.info(
                    "Session closed",
                    extra={"user_name": name, "operation": "logout"},
                )
            return self._finish(AccountOperation.LOGOUT, name, remote, result)

    async def deposit(
        self, name: str, session_id: int, amount: float,
    ) -> LocalResult:
        return await self._gated(
            AccountOperation.DEPOSIT, name, session_id,
            lambda: self._server.deposit(session_id, amount),
        )

    async def withdraw(
        self, name: str, session_id: int, amount: float,
    ) -> LocalResult:
        return await self._gated(
            AccountOperation.WITHDRAW, name, session_id,
            lambda: self._server.withdraw(session_id, amount),
        )

    async def get_balance(self, name: str, session_id: int) -> LocalResult:
        return await self._gated(
            AccountOperation.GET_BALANCE, name, session_id,
            lambda: self._server.get_balance(session_id),
        )

    # ─── Internals ───────────────────────────────────────────────

    def _lock_for(self, name: str) -> asyncio.Lock:
        lock = self._locks.get(name)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[name] = lock
        return lock

    async def _gated(
        self, operation: AccountOperation, name: str, session_id: int,
        make_call: Callable[[], Awaitable[RemoteOutcome]],
    ) -> LocalResult:
        """Shared flow for deposit/withdraw/get_balance: never mutates the table."""
        async with self._lock_for(name):
            rejection = check_session_matches(self._table, name, session_id)
            if rejection is not None:
                return self._reject(operation, name, rejection)

            remote = await self._call_remote(operation, name, make_call())
            result = translate(operation, remote)
            return self._finish(operation, name, remote, result)

    async def _call_remote(
        self, operation: AccountOperation, name: str,
        call: Awaitable[RemoteOutcome],
    ) -> RemoteOutcome:
        try:
            return await call
        except AccountServerError as e:
            logger.warning(
                f"Account server call failed: {e.message}",
                extra={
                    "user_name": name,
                    "operation": operation.value,
                    "error_code": e.code,
                    "error_category": e.category.value,
                },
            )
            return RemoteOutcome(status=RemoteStatus.UNDEFINED_ERROR)

    def _reject(
        self, operation: AccountOperation, name: str, result: LocalResult,
    ) -> LocalResult:
        logger.debug(
            "Rejected locally",
            extra={
                "user_name": name,
                "operation": operation.value,
                "outcome": result.outcome.value,
            },
        )
        return result

    def _finish(
        self, operation: AccountOperation, name: str,
        remote: RemoteOutcome, result: LocalResult,
    ) -> LocalResult:
        logger.debug(
            "Remote call resolved",
            extra={
                "user_name": name,
                "operation": operation.value,
                "remote_status": remote.status.value,
                "outcome": result.outcome.value,
            },
        )
        return result
