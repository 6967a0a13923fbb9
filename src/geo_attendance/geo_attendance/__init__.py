"""Geo Attendance package.

Geofenced, face-verified check-in/check-out organised by feature modules
(offices, schedules, attendance, face, ...) with a thin Flask controller layer
over service/repository layers.
"""
