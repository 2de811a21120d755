"""Attendance Engine package.

Feature modules (attendance, analytics, sessions, directory, ...) follow the
same service/repository split: pure domain logic in services, storage behind
Protocol repositories with MySQL and in-memory implementations.
"""
