"""Session Table: the manager's view of who is logged in, under which token.

Invariants:
    - A name is present iff the manager believes it holds an active session
    - Entries are created only by record() and removed only by discard()
    - Insertion order carries no meaning

Design Decisions:
    - Plain dataclass around a dict: no IO, no locking (the owning service serializes access)
"""

from dataclasses import dataclass, field

from accountgate.core.domain_types import SessionToken, UserName


@dataclass
class SessionTable:
    """Per-manager mapping of user name to active session token."""

    _sessions: dict[UserName, SessionToken] = field(default_factory=dict)

    def lookup(self, name: str) -> SessionToken | None:
        return self._sessions.get(UserName(name))

    def is_logged_in(self, name: str) -> bool:
        return UserName(name) in self._sessions

    def record(self, name: str, token: SessionToken) -> None:
        """Login success: remember the token issued for name."""
        self._sessions[UserName(name)] = token

    def discard(self, name: str) -> None:
        """Logout success: forget name. Missing names are ignored."""
        self._sessions.pop(UserName(name), None)

    def __contains__(self, name: object) -> bool:
        return name in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
