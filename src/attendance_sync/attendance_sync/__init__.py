"""Attendance Sync package.

Reconciles form attendance rows kept in a spreadsheet against a role-based
membership directory. Organized by feature modules (attendance, membership,
sync) with Protocol repositories, concrete adapters and small services.
"""
