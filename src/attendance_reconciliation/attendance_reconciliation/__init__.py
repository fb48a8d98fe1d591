"""Attendance reconciliation engine.

Feature modules (shifts, events, attendance, consistency, repair, reports,
payroll) hold pure domain logic; the reconciliation service and the thin
Flask controller sit on top of them.
"""
