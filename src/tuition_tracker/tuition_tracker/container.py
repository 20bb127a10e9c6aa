from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_TOTAL_AMOUNT_DUE, MAX_PHOTO_BYTES
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .payments.calculator.standard_calculator import StandardRecoveryCalculator
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    students_repo: StudentRepository

    student_service: StudentService
    dashboard_service: DashboardService
    auth_service: AuthService


def build_services(
    students_repo: StudentRepository,
    *,
    conn: Optional[DatabaseConnection] = None,
    default_total_amount_due: float = DEFAULT_TOTAL_AMOUNT_DUE,
    max_photo_bytes: int = MAX_PHOTO_BYTES,
    credentials: Optional[dict] = None,
) -> Container:
    student_service = StudentService(
        students_repo,
        default_total_amount_due=default_total_amount_due,
        max_photo_bytes=max_photo_bytes,
    )
    dashboard_service = DashboardService(students_repo, calculator=StandardRecoveryCalculator())
    auth_service = AuthService(credentials)

    return Container(
        conn=conn,
        students_repo=students_repo,
        student_service=student_service,
        dashboard_service=dashboard_service,
        auth_service=auth_service,
    )


def build_container(*, db_config: dict, **options) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)
    return build_services(MySQLStudentRepository(conn), conn=conn, **options)
