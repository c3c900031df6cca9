"""School Attendance package.

This package is organized by feature modules (identities, classes, teachers,
students, attendance, ...) with a thin Flask controller layer and
service/repository layers backed by MongoDB.
"""
