"""Password Hardeners: one-way transforms applied before credentials leave the process.

Invariants:
    - A hardener is deterministic for a given configuration: same input, same output
    - No hardener logs or stores its input
"""

import hashlib

from accountgate.core.collaborator_protocols import PasswordHardener


def identity_hardener(password: str) -> str:
    """Pass-through. For tests and servers that hash on their side."""
    return password


def make_pbkdf2_hardener(salt: str, iterations: int = 100_000) -> PasswordHardener:
    """PBKDF2-HMAC-SHA256 with a fixed salt, hex-encoded."""
    if iterations < 1:
        raise ValueError("iterations must be positive")
    salt_bytes = salt.encode("utf-8")

    def harden(password: str) -> str:
        digest = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt_bytes, iterations,
        )
        return digest.hex()

    return harden
