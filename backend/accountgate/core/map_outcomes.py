"""Outcome Translation: remote status vocabulary to local result vocabulary.

Invariants:
    - translate() is PURE and total: every (operation, status) pair yields a LocalResult
    - Statuses missing from an operation's table collapse to UNDEFINED_ERROR
    - NO_MONEY means INSUFFICIENT_FUNDS for withdraw only; on deposit it is UNDEFINED_ERROR
    - login mirrors the remote payload on every outcome; other operations
      carry a payload only on success
    - A login SUCCESS without an integer session token is UNDEFINED_ERROR
"""

from accountgate.core.account_results import LocalResult, RemoteOutcome
from accountgate.core.domain_types import (
    AccountOperation, AccountOutcome, RemoteStatus,
)


_LOGIN_MAP: dict[RemoteStatus, AccountOutcome] = {
    RemoteStatus.SUCCESS: AccountOutcome.SUCCEEDED,
    RemoteStatus.ALREADY_LOGGED: AccountOutcome.ALREADY_LOGGED,
    RemoteStatus.NO_USER_INCORRECT_PASSWORD: AccountOutcome.NO_USER_INCORRECT_PASSWORD,
}

_LOGOUT_MAP: dict[RemoteStatus, AccountOutcome] = {
    RemoteStatus.SUCCESS: AccountOutcome.SUCCEEDED,
    RemoteStatus.NOT_LOGGED: AccountOutcome.NOT_LOGGED,
}

_DEPOSIT_MAP: dict[RemoteStatus, AccountOutcome] = {
    RemoteStatus.SUCCESS: AccountOutcome.SUCCEEDED,
    RemoteStatus.NOT_LOGGED: AccountOutcome.NOT_LOGGED,
}

_WITHDRAW_MAP: dict[RemoteStatus, AccountOutcome] = {
    RemoteStatus.SUCCESS: AccountOutcome.SUCCEEDED,
    RemoteStatus.NOT_LOGGED: AccountOutcome.NOT_LOGGED,
    RemoteStatus.NO_MONEY: AccountOutcome.INSUFFICIENT_FUNDS,
}

_GET_BALANCE_MAP: dict[RemoteStatus, AccountOutcome] = {
    RemoteStatus.SUCCESS: AccountOutcome.SUCCEEDED,
    RemoteStatus.NOT_LOGGED: AccountOutcome.NOT_LOGGED,
}

STATUS_MAPS: dict[AccountOperation, dict[RemoteStatus, AccountOutcome]] = {
    AccountOperation.LOGIN: _LOGIN_MAP,
    AccountOperation.LOGOUT: _LOGOUT_MAP,
    AccountOperation.DEPOSIT: _DEPOSIT_MAP,
    AccountOperation.WITHDRAW: _WITHDRAW_MAP,
    AccountOperation.GET_BALANCE: _GET_BALANCE_MAP,
}


def map_status(operation: AccountOperation, status: RemoteStatus) -> AccountOutcome:
    """Local outcome for a remote status, in the context of one operation."""
    return STATUS_MAPS[operation].get(status, AccountOutcome.UNDEFINED_ERROR)


def is_session_token(payload: object) -> bool:
    return isinstance(payload, int) and not isinstance(payload, bool)


def translate(operation: AccountOperation, remote: RemoteOutcome) -> LocalResult:
    """Build the caller-facing result for a remote response."""
    outcome = map_status(operation, remote.status)
    if operation is AccountOperation.LOGIN:
        if outcome is AccountOutcome.SUCCEEDED and not is_session_token(remote.payload):
            outcome = AccountOutcome.UNDEFINED_ERROR
        return LocalResult(outcome=outcome, payload=remote.payload)
    if operation is AccountOperation.LOGOUT:
        return LocalResult(outcome=outcome)
    if outcome is AccountOutcome.SUCCEEDED:
        return LocalResult(outcome=outcome, payload=remote.payload)
    return LocalResult(outcome=outcome)
