"""Account Routes: thin HTTP wrappers around the five SessionManager operations.

Invariants:
    - Every operation answers 200 with {"outcome", "payload"}; business rejections
      (not_logged, incorrect_session, ...) are outcomes, not HTTP errors
    - Request bodies validated by Pydantic before reaching the handler
    - Passwords never logged
"""

import logging

from fastapi import APIRouter, Depends

from accountgate.api.dependencies import get_session_manager
from accountgate.core.account_results import LocalResult
from accountgate.schemas.account import (
    AccountResultResponse, LoginRequest, SessionRequest, TransferRequest,
)
from accountgate.services.session_manager import SessionManager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/accounts", tags=["accounts"])


def _respond(result: LocalResult) -> AccountResultResponse:
    return AccountResultResponse(outcome=result.outcome, payload=result.payload)


@router.post("/login", response_model=AccountResultResponse)
async def login(
    body: LoginRequest,
    manager: SessionManager = Depends(get_session_manager),
):
    """Open a session for body.name."""
    return _respond(await manager.login(body.name, body.password))


@router.post("/logout", response_model=AccountResultResponse)
async def logout(
    body: SessionRequest,
    manager: SessionManager = Depends(get_session_manager),
):
    """Close the session held by body.name."""
    return _respond(await manager.logout(body.name, body.session_id))


@router.post("/deposit", response_model=AccountResultResponse)
async def deposit(
    body: TransferRequest,
    manager: SessionManager = Depends(get_session_manager),
):
    return _respond(
        await manager.deposit(body.name, body.session_id, body.amount),
    )


@router.post("/withdraw", response_model=AccountResultResponse)
async def withdraw(
    body: TransferRequest,
    manager: SessionManager = Depends(get_session_manager),
):
    return _respond(
        await manager.withdraw(body.name, body.session_id, body.amount),
    )


@router.post("/balance", response_model=AccountResultResponse)
async def get_balance(
    body: SessionRequest,
    manager: SessionManager = Depends(get_session_manager),
):
    return _respond(await manager.get_balance(body.name, body.session_id))
