"""Session Gates: tests for pure pre-remote checks.

Tests cover:
    - check_login_allowed rejects an already-logged name
    - check_logout_allowed rejects an unknown name, ignores token mismatch
    - check_session_matches distinguishes not_logged from incorrect_session
    - Rejections carry no payload and never mutate the table
"""

from accountgate.core.domain_types import AccountOutcome, SessionToken
from accountgate.core.enforce_session import (
    check_login_allowed, check_logout_allowed, check_session_matches,
)
from accountgate.core.session_table import SessionTable


def _table_with(name="alice", token=3):
    table = SessionTable()
    table.record(name, SessionToken(token))
    return table


# ─── check_login_allowed ─────────────────────────────────────────

def test_login_allowed_for_unknown_name():
    assert check_login_allowed(SessionTable(), "alice") is None


def test_login_rejected_when_already_logged():
    result = check_login_allowed(_table_with(), "alice")
    assert result.outcome == AccountOutcome.ALREADY_LOGGED
    assert result.payload is None


def test_login_allowed_for_other_name():
    assert check_login_allowed(_table_with(), "bob") is None


# ─── check_logout_allowed ────────────────────────────────────────

def test_logout_rejected_for_unknown_name():
    result = check_logout_allowed(SessionTable(), "alice")
    assert result.outcome == AccountOutcome.NOT_LOGGED


def test_logout_allowed_when_logged_in():
    assert check_logout_allowed(_table_with(), "alice") is None


# ─── check_session_matches ───────────────────────────────────────

def test_session_check_not_logged():
    result = check_session_matches(SessionTable(), "alice", 3)
    assert result.outcome == AccountOutcome.NOT_LOGGED


def test_session_check_incorrect_session():
    result = check_session_matches(_table_with(token=3), "alice", 4)
    assert result.outcome == AccountOutcome.INCORRECT_SESSION
    assert result.payload is None


def test_session_check_passes_on_exact_match():
    assert check_session_matches(_table_with(token=3), "alice", 3) is None


def test_session_check_does_not_mutate_table():
    table = _table_with(token=3)
    check_session_matches(table, "alice", 4)
    check_session_matches(table, "bob", 3)
    assert len(table) == 1
    assert table.lookup("alice") == 3
