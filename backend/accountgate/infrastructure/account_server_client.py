"""HTTP Account Server: AccountServer implementation over JSON/HTTP, built on httpx.

Invariants:
    - One POST per operation; body fields: name, password, session_id, amount
    - Response body {"status": str, "payload": number | null}
    - Unknown status strings parse to RemoteStatus.UNDEFINED_ERROR
    - Timeouts, connection errors and non-2xx answers raise AccountServerError
    - Undecodable bodies raise MalformedResponseError
    - No retries: a failure surfaces on the first attempt

Design Decisions:
    - Wrapper over raw client: isolates transport and error mapping from SessionManager
    - transport parameter lets tests plug httpx.MockTransport
"""

import logging

import httpx

from accountgate.core.account_results import Payload, RemoteOutcome
from accountgate.core.domain_types import RemoteStatus
from accountgate.core.errors import (
    AccountServerError, ErrorContext, MalformedResponseError,
)

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
LOGOUT_PATH = "/logout"
DEPOSIT_PATH = "/deposit"
WITHDRAW_PATH = "/withdraw"
BALANCE_PATH = "/balance"


def parse_outcome(data: object) -> RemoteOutcome:
    """Decode a response body into a RemoteOutcome."""
    if not isinstance(data, dict) or "status" not in data:
        raise MalformedResponseError(f"Expected object with 'status', got {data!r}")
    payload = data.get("payload")
    if payload is not None and (
        isinstance(payload, bool) or not isinstance(payload, (int, float))
    ):
        raise MalformedResponseError(f"Non-numeric payload: {payload!r}")
    return RemoteOutcome(status=RemoteStatus.parse(data["status"]), payload=payload)


class HttpAccountServer:
    """Talks to the remote account server. Satisfies the AccountServer protocol."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def login(self, name: str, hardened_password: str) -> RemoteOutcome:
        return await self._post(
            LOGIN_PATH, {"name": name, "password": hardened_password},
        )

    async def logout(self, session_id: int) -> RemoteOutcome:
        return await self._post(LOGOUT_PATH, {"session_id": session_id})

    async def deposit(self, session_id: int, amount: float) -> RemoteOutcome:
        return await self._post(
            DEPOSIT_PATH, {"session_id": session_id, "amount": amount},
        )

    async def withdraw(self, session_id: int, amount: float) -> RemoteOutcome:
        return await self._post(
            WITHDRAW_PATH, {"session_id": session_id, "amount": amount},
        )

    async def get_balance(self, session_id: int) -> RemoteOutcome:
        return await self._post(BALANCE_PATH, {"session_id": session_id})

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _post(self, path: str, body: dict[str, Payload | str]) -> RemoteOutcome:
        context = ErrorContext(operation=path.lstrip("/"))
        try:
            response = await self.client.post(path, json=body)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise AccountServerError(str(e) or "timed out", "timeout", context) from e
        except httpx.HTTPStatusError as e:
            raise AccountServerError(
                f"HTTP {e.response.status_code}", "http_status", context,
            ) from e
        except httpx.RequestError as e:
            raise AccountServerError(str(e), "connection_error", context) from e

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError("Response body is not JSON", context) from e
        try:
            return parse_outcome(data)
        except MalformedResponseError as e:
            e.context = context
            raise
