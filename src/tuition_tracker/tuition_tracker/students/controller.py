from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, StorageError, ValidationError
from ..users.session import admin_required, login_required
from .serializers import student_to_dict


def register(app: Flask, container: Container) -> None:
    prefix = app.config.get("API_PREFIX", "/api")
    service = container.student_service

    def _error(e: Exception, status: int):
        return jsonify({"message": str(e)}), status

    def _internal(action: str, student_id: str = ""):
        app.logger.exception("Error %s %s", action, student_id)
        return jsonify({"message": f"Erreur lors de {action}"}), 500

    @app.route(f"{prefix}/students", methods=["GET"], endpoint="list_students")
    @login_required
    def list_students():
        try:
            students = service.list_students(search=request.args.get("search"), level=request.args.get("level"))
        except StorageError:
            return _internal("la récupération des étudiants")
        return jsonify([student_to_dict(s) for s in students])

    @app.route(f"{prefix}/students/count", methods=["GET"], endpoint="count_students")
    @login_required
    def count_students():
        try:
            return jsonify({"total": service.count_students()})
        except StorageError:
            return _internal("le comptage des étudiants")

    @app.route(f"{prefix}/students/<student_id>", methods=["GET"], endpoint="get_student")
    @login_required
    def get_student(student_id: str):
        try:
            return jsonify(student_to_dict(service.get_student(student_id)))
        except NotFoundError as e:
            return _error(e, 404)
        except StorageError:
            return _internal("la récupération de l'étudiant", student_id)

    @app.route(f"{prefix}/students", methods=["POST"], endpoint="create_student")
    @admin_required
    def create_student():
        try:
            student = service.create_student(request.get_json(silent=True))
        except ValidationError as e:
            return _error(e, 400)
        except StorageError:
            return _internal("la création de l'étudiant")
        app.logger.info("Student created: %s", student.id)
        return jsonify(student_to_dict(student)), 201

    @app.route(f"{prefix}/students/<student_id>", methods=["PUT"], endpoint="update_student")
    @admin_required
    def update_student(student_id: str):
        try:
            student = service.update_student(student_id, request.get_json(silent=True))
        except ValidationError as e:
            return _error(e, 400)
        except NotFoundError as e:
            return _error(e, 404)
        except StorageError:
            return _internal("la mise à jour de l'étudiant", student_id)
        return jsonify(student_to_dict(student))

    @app.route(f"{prefix}/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    @admin_required
    def delete_student(student_id: str):
        try:
            service.delete_student(student_id)
        except NotFoundError as e:
            return _error(e, 404)
        except StorageError:
            return _internal("la suppression de l'étudiant", student_id)
        app.logger.info("Student deleted: %s", student_id)
        return jsonify({"message": "Étudiant supprimé avec succès"})

    @app.route(f"{prefix}/students/<student_id>/payments", methods=["POST"], endpoint="append_payment")
    @admin_required
    def append_payment(student_id: str):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        try:
            student = service.append_payment(
                student_id,
                month=data.get("month"),
                amount=data.get("amount"),
                method=data.get("method"),
                receipt_number=data.get("receiptNumber"),
            )
        except ValidationError as e:
            return _error(e, 400)
        except NotFoundError as e:
            return _error(e, 404)
        except StorageError:
            return _internal("la mise à jour du paiement", student_id)
        return jsonify(student_to_dict(student))
