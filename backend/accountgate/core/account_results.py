"""Account Results: value objects crossing the core boundary.

Invariants:
    - RemoteOutcome is what a collaborator server returns; LocalResult is what callers get
    - Both are frozen: a result never changes after it is produced
    - Payload is a session token (login) or an amount (financial ops), None when absent
"""

from dataclasses import dataclass

from accountgate.core.domain_types import AccountOutcome, RemoteStatus

Payload = int | float | None


@dataclass(frozen=True)
class RemoteOutcome:
    """Status/payload pair reported by the remote account server."""
    status: RemoteStatus
    payload: Payload = None


@dataclass(frozen=True)
class LocalResult:
    """Outcome of a SessionManager operation, as seen by the caller."""
    outcome: AccountOutcome
    payload: Payload = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is AccountOutcome.SUCCEEDED


def rejected(outcome: AccountOutcome) -> LocalResult:
    """Local rejection: decided without a remote call, never carries a payload."""
    return LocalResult(outcome=outcome)
