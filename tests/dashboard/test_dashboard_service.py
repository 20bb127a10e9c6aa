from __future__ import annotations

from datetime import datetime

from src.tuition_tracker.tuition_tracker.core.exceptions import NetworkError, StorageError
from src.tuition_tracker.tuition_tracker.dashboard.service import DashboardService, DashboardStats
from src.tuition_tracker.tuition_tracker.payments.model import PaymentRecord
from src.tuition_tracker.tuition_tracker.students.model import Student


def _student(sid, level, due, paid, enrolled=None):
    return Student(
        id=sid,
        first_name=sid,
        last_name="Test",
        email=f"{sid}@example.ma",
        level=level,
        total_amount_due=due,
        payments=tuple(PaymentRecord(month=m, amount_paid=a) for m, a in paid.items()),
        enrollment_date=enrolled,
    )


class FakeStudentsRepo:
    def __init__(self, students=None, error=None):
        self._students = students or []
        self._error = error

    def list_all(self):
        if self._error:
            raise self._error
        return list(self._students)


STUDENTS = [
    _student("a", "Master 1", 15000, {"Septembre": 3750}, datetime(2025, 9, 1)),
    _student("b", "Master 1", 15000, {"Septembre": 7500, "Octobre": 3750}, datetime(2025, 9, 5)),
    _student("c", "Master 2", 20000, {"Septembre": 20000}, datetime(2025, 9, 3)),
    _student("d", "1ère Année", 10000, {}, None),
    _student("e", None, 15000, {"Mai": 100, "NotAMonth": 999}, datetime(2025, 10, 1)),
]


def test_stats_over_all_students():
    stats = DashboardService(FakeStudentsRepo(STUDENTS)).get_stats()

    assert stats.total_students == 5
    assert stats.total_payments == 3750 + 11250 + 20000 + 100
    # 35100 / 75000 -> 46.8%
    assert stats.recovery_rate == 47
    assert [s.id for s in stats.recent_students] == ["e", "b", "c", "a"]


def test_level_filter_restricts_every_figure():
    stats = DashboardService(FakeStudentsRepo(STUDENTS)).get_stats("Master 1")

    assert stats.total_students == 2
    assert stats.total_payments == 15000
    assert stats.recovery_rate == 50
    assert [s.id for s in stats.recent_students] == ["b", "a"]


def test_rate_is_set_level_not_average_of_students():
    students = [
        _student("x", "Master 2", 1000, {"Mars": 1000}),
        _student("y", "Master 2", 9000, {}),
    ]

    # Mean of per-student rates would be 50; the set-level rate is 10.
    assert DashboardService(FakeStudentsRepo(students)).get_stats().recovery_rate == 10


def test_students_without_enrollment_date_sort_last():
    students = [
        _student("old", None, 0, {}, None),
        _student("new", None, 0, {}, datetime(2020, 1, 1)),
    ]

    stats = DashboardService(FakeStudentsRepo(students), recent_limit=4).get_stats()

    assert [s.id for s in stats.recent_students] == ["new", "old"]
    assert stats.recovery_rate == 0


def test_unknown_level_gives_empty_stats():
    assert DashboardService(FakeStudentsRepo(STUDENTS)).get_stats("Master 3") == DashboardStats()


def test_fetch_failure_degrades_to_zeroes():
    for error in (StorageError("db down"), NetworkError("offline"), RuntimeError("bug")):
        stats = DashboardService(FakeStudentsRepo(error=error)).get_stats("Master 1")

        assert stats == DashboardStats(total_students=0, total_payments=0, recovery_rate=0, recent_students=[])


def test_stats_endpoint(client, students_repo):
    for s in STUDENTS:
        students_repo.insert(s)

    data = client.get("/api/dashboard/stats?level=Master%201").get_json()

    assert data["totalStudents"] == 2
    assert data["totalPayments"] == 15000
    assert data["recoveryRate"] == 50
    assert [s["firstName"] for s in data["recentStudents"]] == ["b", "a"]


def test_set_rate_rounds_half_up_on_cent_amounts():
    students = [
        _student("x", "Master 1", 1, {"Septembre": 0.01}),
        _student("y", "Master 1", 1, {"Septembre": 0.06}),
    ]

    stats = DashboardService(FakeStudentsRepo(students)).get_stats()

    assert stats.total_payments == 0.07
    assert stats.recovery_rate == 4
