from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..students.serializers import student_to_dict
from ..users.session import login_required


def register(app: Flask, container: Container) -> None:
    prefix = app.config.get("API_PREFIX", "/api")

    @app.route(f"{prefix}/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    @login_required
    def dashboard_stats():
        stats = container.dashboard_service.get_stats(request.args.get("level") or None)
        return jsonify(
            {
                "totalStudents": stats.total_students,
                "totalPayments": stats.total_payments,
                "recoveryRate": stats.recovery_rate,
                "recentStudents": [student_to_dict(s) for s in stats.recent_students],
            }
        )
