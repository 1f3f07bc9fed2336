"""Session Gates: local checks run before the remote server is contacted.

Invariants:
    - Every check is PURE: reads the table, never mutates it
    - None means "proceed to the remote call"; a LocalResult means "rejected locally"
    - login rejects a name that already holds a session
    - logout only requires presence; the supplied token is NOT compared with the stored one
    - financial/query operations require presence AND an exact token match
"""

from accountgate.core.account_results import LocalResult, rejected
from accountgate.core.domain_types import AccountOutcome
from accountgate.core.session_table import SessionTable


def check_login_allowed(table: SessionTable, name: str) -> LocalResult | None:
    """login: a second login for the same name is refused without asking the server."""
    if table.is_logged_in(name):
        return rejected(AccountOutcome.ALREADY_LOGGED)
    return None


def check_logout_allowed(table: SessionTable, name: str) -> LocalResult | None:
    """logout: unknown names short-circuit to NOT_LOGGED."""
    if not table.is_logged_in(name):
        return rejected(AccountOutcome.NOT_LOGGED)
    return None


def check_session_matches(
    table: SessionTable, name: str, session_id: int,
) -> LocalResult | None:
    """deposit/withdraw/get_balance: name must be logged in under exactly session_id."""
    stored = table.lookup(name)
    if stored is None:
        return rejected(AccountOutcome.NOT_LOGGED)
    if stored != session_id:
        return rejected(AccountOutcome.INCORRECT_SESSION)
    return None
