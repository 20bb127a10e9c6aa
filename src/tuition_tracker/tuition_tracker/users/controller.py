from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..container import Container
from ..core.exceptions import AuthenticationError, ValidationError
from .session import SESSION_KEY, current_session_user


def register(app: Flask, container: Container) -> None:
    prefix = app.config.get("API_PREFIX", "/api")

    @app.route(f"{prefix}/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        try:
            user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except AuthenticationError as e:
            return jsonify({"message": str(e)}), 401

        session.clear()
        session[SESSION_KEY] = user.to_session()
        app.logger.info("Login: %s (%s)", user.email, user.role.value)
        return jsonify(user.to_session())

    @app.route(f"{prefix}/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Déconnecté"})

    @app.route(f"{prefix}/auth/me", methods=["GET"], endpoint="me")
    def me():
        user = current_session_user()
        if user is None:
            return jsonify({"message": "Veuillez vous connecter"}), 401
        return jsonify(user.to_session())
