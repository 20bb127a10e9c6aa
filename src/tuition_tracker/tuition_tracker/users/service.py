from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from .model import Account

# email -> (password, role). Demo credentials, not a user store.
DEFAULT_CREDENTIALS: Mapping[str, Tuple[str, str]] = {
    "admin@emcgi.ma": ("admin123", Role.ADMIN.value),
    "user@emcgi.ma": ("user123", Role.READONLY.value),
}


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_session(self) -> Dict[str, str]:
        return {"email": self.email, "role": self.role.value}

    @classmethod
    def from_session(cls, data: Optional[Mapping]) -> Optional["SessionUser"]:
        if not data or not data.get("email") or not data.get("role"):
            return None
        try:
            return cls(email=str(data["email"]), role=Role(data["role"]))
        except ValueError:
            return None


class AuthService:
    """Use case: authenticate against a fixed set of credentials (login)."""

    def __init__(self, credentials: Optional[Mapping[str, Tuple[str, str]]] = None):
        self._accounts: Dict[str, Account] = {
            email.lower(): Account(email=email, password_hash=generate_password_hash(password), role=Role(role))
            for email, (password, role) in (credentials or DEFAULT_CREDENTIALS).items()
        }

    def authenticate(self, email: str, password: str) -> SessionUser:
        email = require_non_empty(email, "L'email")
        account = self._accounts.get(email.lower())
        if not account or not check_password_hash(account.password_hash, password or ""):
            raise AuthenticationError("Email ou mot de passe incorrect")
        return SessionUser(email=account.email, role=account.role)

    @staticmethod
    def require_admin(user: Optional[SessionUser]) -> SessionUser:
        if user is None:
            raise AuthenticationError("Veuillez vous connecter")
        if not user.is_admin:
            raise AuthorizationError("Accès en lecture seule")
        return user
