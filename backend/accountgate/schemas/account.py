"""Account Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - name: 1-256 chars, stripped, non-empty
    - session_id is a non-negative signed 64-bit integer
    - amount is passed through untouched (balance rules belong to the remote server)
"""

from pydantic import BaseModel, Field, field_validator

from accountgate.core.domain_types import AccountOutcome, SESSION_TOKEN_MAX


class _NamedRequest(BaseModel):
    name: str = Field(min_length=1, max_length=256)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class LoginRequest(_NamedRequest):
    password: str = Field(max_length=1024)


class SessionRequest(_NamedRequest):
    """logout and balance queries."""
    session_id: int = Field(ge=0, le=SESSION_TOKEN_MAX)


class TransferRequest(SessionRequest):
    """deposit and withdraw."""
    amount: float


class AccountResultResponse(BaseModel):
    """Every account operation answers with this shape, including rejections."""
    outcome: AccountOutcome
    payload: int | float | None = None
