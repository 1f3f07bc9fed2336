"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - SessionToken wraps the 64-bit integer issued by the remote server on login
    - UserName is the unique key of the session table
    - Remote and local vocabularies are separate Enums; translation lives in map_outcomes
    - Unknown remote status strings parse to RemoteStatus.UNDEFINED_ERROR

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserName = NewType("UserName", str)
SessionToken = NewType("SessionToken", int)


# ─── Bounds ──────────────────────────────────────────────────────

SESSION_TOKEN_MAX: int = 2 ** 63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class AccountOperation(str, Enum):
    """The five operations exposed to callers."""
    LOGIN = "login"
    LOGOUT = "logout"
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    GET_BALANCE = "get_balance"


class RemoteStatus(str, Enum):
    """Status vocabulary of the remote account server."""
    SUCCESS = "success"
    ALREADY_LOGGED = "already_logged"
    NOT_LOGGED = "not_logged"
    NO_USER_INCORRECT_PASSWORD = "no_user_incorrect_password"
    NO_MONEY = "no_money"
    UNDEFINED_ERROR = "undefined_error"

    @classmethod
    def parse(cls, raw: object) -> "RemoteStatus":
        """Wire value to status. Anything unrecognized is UNDEFINED_ERROR."""
        try:
            return cls(raw)
        except ValueError:
            return cls.UNDEFINED_ERROR


class AccountOutcome(str, Enum):
    """Local result vocabulary returned to callers."""
    SUCCEEDED = "succeeded"
    ALREADY_LOGGED = "already_logged"
    NOT_LOGGED = "not_logged"
    INCORRECT_SESSION = "incorrect_session"
    NO_USER_INCORRECT_PASSWORD = "no_user_incorrect_password"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    UNDEFINED_ERROR = "undefined_error"
