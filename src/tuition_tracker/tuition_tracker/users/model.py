from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Account:
    """A login known to the application (no users table; see AuthService)."""

    email: str
    password_hash: str
    role: Role
