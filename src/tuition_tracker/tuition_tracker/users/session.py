from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import current_app, jsonify, session

from ..core.exceptions import AuthenticationError, AuthorizationError
from .service import AuthService, SessionUser

SESSION_KEY = "user"


def current_session_user() -> Optional[SessionUser]:
    return SessionUser.from_session(session.get(SESSION_KEY))


def _auth_required() -> bool:
    return bool(current_app.config.get("AUTH_REQUIRED", False))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if _auth_required() and current_session_user() is None:
            return jsonify({"message": "Veuillez vous connecter"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if _auth_required():
            try:
                AuthService.require_admin(current_session_user())
            except AuthenticationError as e:
                return jsonify({"message": str(e)}), 401
            except AuthorizationError as e:
                return jsonify({"message": str(e)}), 403
        return view(*args, **kwargs)

    return wrapper
