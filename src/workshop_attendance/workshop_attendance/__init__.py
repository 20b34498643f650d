"""Workshop Attendance package.

Organized by feature modules (members, sessions, attendance, reports) over a
shared in-memory store, with a thin Flask controller layer on top of the
service/repository layers.
"""
