"""Tuition Tracker package.

Student records with a twelve-month payment ledger, organized by feature modules
(payments, students, dashboard, ...) behind a thin Flask controller layer and
service/repository layers.
"""
