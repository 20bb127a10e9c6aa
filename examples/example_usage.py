"""Example: dashboard figures computed client-side, over the REST API.

Same DashboardService as the server uses, fed by StudentApiClient instead of MySQL.
"""

import importlib
import sys

from config import get_settings_module

from src.tuition_tracker.tuition_tracker.client.api_client import StudentApiClient
from src.tuition_tracker.tuition_tracker.dashboard.service import DashboardService


def main():
    settings = importlib.import_module(get_settings_module())
    client = StudentApiClient(settings.API_BASE_URL, timeout=settings.API_TIMEOUT)
    level = sys.argv[1] if len(sys.argv) > 1 else None

    stats = DashboardService(client).get_stats(level)
    print(f"students={stats.total_students} paid={stats.total_payments:.2f} recovery={stats.recovery_rate}%")
    for s in stats.recent_students:
        enrolled = s.enrollment_date.strftime("%Y-%m-%d") if s.enrollment_date else "-"
        print(f"  {enrolled}  {s.full_name}  ({s.level or '-'})")


if __name__ == "__main__":
    main()
